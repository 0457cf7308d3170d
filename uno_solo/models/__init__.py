"""Game models."""

from .card import Card, CardKind, Color, build_deck, deal_hand, shuffle_deck
from .game_state import (
    Action,
    Actor,
    EmptyDiscardPileError,
    GameSession,
    GameStatus,
    new_session,
)

__all__ = [
    "Card",
    "CardKind",
    "Color",
    "build_deck",
    "deal_hand",
    "shuffle_deck",
    "Action",
    "Actor",
    "EmptyDiscardPileError",
    "GameSession",
    "GameStatus",
    "new_session",
]
