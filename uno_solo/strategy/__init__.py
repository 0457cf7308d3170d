"""Strategy module for the computer opponent."""

from uno_solo.strategy.base import Strategy
from uno_solo.strategy.simple import AlwaysDrawStrategy, FirstLegalStrategy, get_strategy

__all__ = ["Strategy", "FirstLegalStrategy", "AlwaysDrawStrategy", "get_strategy"]
