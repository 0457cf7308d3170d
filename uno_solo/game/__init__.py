"""Game logic."""

from .validator import can_play, find_playable
from .engine import GameLoop, Outcome, TurnEngine, TurnResult, evaluate, parse_action

__all__ = [
    "can_play",
    "find_playable",
    "GameLoop",
    "Outcome",
    "TurnEngine",
    "TurnResult",
    "evaluate",
    "parse_action",
]
