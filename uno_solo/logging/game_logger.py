"""Game logger for detailed game replay."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from uno_solo.config import GameLogConfig
from uno_solo.models.game_state import GameSession, GameStatus

from .formatters import format_card, format_cards

if TYPE_CHECKING:
    from uno_solo.game.engine import TurnResult


def generate_log_filename(log_dir: str, seed: int | None) -> str:
    """Generate log filename with timestamp and seed.

    Format: {timestamp}_seed{seed}.jsonl ("random" when no seed is set)

    Args:
        log_dir: Directory for log files.
        seed: Shuffle seed of the game.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    seed_part = "random" if seed is None else str(seed)
    return str(Path(log_dir) / f"{timestamp}_seed{seed_part}.jsonl")


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Set up a closed logger; the file opens on `with`.

        Args:
            config: `output_path` names the JSONL file itself. None disables
                the log and every `log_*` call becomes a no-op.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> GameLogger:
        """Open (append mode) the log file when enabled."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the file; safe to call more than once."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, session: GameSession) -> None:
        """Log game start with the dealt hands."""
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "seed": session.seed,
            "hands": {
                "player": format_cards(session.player_hand),
                "computer": format_cards(session.computer_hand),
            },
            "top": format_card(session.top_card),
            "deck_size": len(session.deck),
        })

    def log_turn(self, session: GameSession, result: TurnResult) -> None:
        """Log a single applied action.

        Args:
            session: Session state after the action.
            result: What the action did.
        """
        self._write({
            "type": "turn",
            "round": session.round_number,
            "actor": result.actor.value,
            "action": result.action.value,
            "outcome": result.outcome.value,
            "card": format_card(result.card) if result.card else "",
            "fallback": result.fallback,
            "top": format_card(session.top_card),
            "hand_sizes": {
                "player": len(session.player_hand),
                "computer": len(session.computer_hand),
            },
            "deck_size": len(session.deck),
        })

    def log_game_end(self, session: GameSession, status: GameStatus) -> None:
        """Log game end with the final status."""
        self._write({
            "type": "game_end",
            "status": status.value,
            "rounds": session.round_number,
            "hands": {
                "player": format_cards(session.player_hand),
                "computer": format_cards(session.computer_hand),
            },
        })
