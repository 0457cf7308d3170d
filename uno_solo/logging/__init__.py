"""Game logging module."""

from .formatters import format_card, format_cards
from .game_logger import GameLogger, generate_log_filename

__all__ = [
    "GameLogger",
    "format_card",
    "format_cards",
    "generate_log_filename",
]
