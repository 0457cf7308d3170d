"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from uno_solo.models.game_state import GameStatus

if TYPE_CHECKING:
    from uno_solo.models.card import Card


OUTCOME_MESSAGES = {
    GameStatus.PLAYER_WON: "Congratulations! You won!",
    GameStatus.COMPUTER_WON: "Sorry, you lost. The computer won!",
    GameStatus.DRAW: "The deck is empty. The game is a draw.",
}


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Log records go to stderr so they do not interleave with the game
    transcript on stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, stream: TextIO | None = None):
        """Initialize display.

        Args:
            stream: Output stream (defaults to sys.stdout at print time)
        """
        self.stream = stream

    def print_line(self, text: str = "") -> None:
        print(text, file=self.stream or sys.stdout)

    def print_game_state(self, hand: list["Card"], top: "Card") -> None:
        """Print the player's hand and the discard top."""
        self.print_line("Your hand:")
        for card in hand:
            self.print_line(f"  {card}")
        self.print_line(f"Top card: {top}")

    def print_outcome(self, status: GameStatus) -> None:
        """Print the terminal message for a finished game."""
        message = OUTCOME_MESSAGES.get(status)
        if message:
            self.print_line(message)
