"""Card model and deck construction."""

import random
from enum import Enum

from pydantic import BaseModel, model_validator


class Color(str, Enum):
    """Card color."""

    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"


class CardKind(str, Enum):
    """Card variant."""

    NUMBER = "Number"
    SKIP = "Skip"
    REVERSE = "Reverse"
    DRAW_TWO = "DrawTwo"
    WILD = "Wild"


# Generation order for build_deck()
COLORS = [Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW]
RANKS = range(1, 10)
ACTION_KINDS = [CardKind.SKIP, CardKind.REVERSE, CardKind.DRAW_TWO]

DEFAULT_HAND_SIZE = 7


class Card(BaseModel, frozen=True):
    """Single card representation.

    Number cards carry a color and a rank (1-9), action cards
    (Skip/Reverse/DrawTwo) carry only a color, Wild carries neither.
    """

    kind: CardKind
    color: Color | None = None
    rank: int | None = None

    @model_validator(mode="after")
    def _check_fields(self) -> "Card":
        if self.kind == CardKind.WILD:
            if self.color is not None or self.rank is not None:
                raise ValueError("Wild card has no color or rank")
            return self
        if self.color is None:
            raise ValueError(f"{self.kind.value} card must have a color")
        if self.kind == CardKind.NUMBER:
            if self.rank is None or self.rank not in RANKS:
                raise ValueError("Number card rank must be between 1 and 9")
        elif self.rank is not None:
            raise ValueError(f"{self.kind.value} card has no rank")
        return self

    @classmethod
    def number(cls, color: Color, rank: int) -> "Card":
        return cls(kind=CardKind.NUMBER, color=color, rank=rank)

    @classmethod
    def skip(cls, color: Color) -> "Card":
        return cls(kind=CardKind.SKIP, color=color)

    @classmethod
    def reverse(cls, color: Color) -> "Card":
        return cls(kind=CardKind.REVERSE, color=color)

    @classmethod
    def draw_two(cls, color: Color) -> "Card":
        return cls(kind=CardKind.DRAW_TWO, color=color)

    @classmethod
    def wild(cls) -> "Card":
        return cls(kind=CardKind.WILD)

    @property
    def is_wild(self) -> bool:
        """Check if this card is a wild card."""
        return self.kind == CardKind.WILD

    def __str__(self) -> str:
        if self.is_wild:
            return "Wild"
        if self.kind == CardKind.NUMBER:
            return f"{self.kind.value}({self.color.value}, {self.rank})"
        return f"{self.kind.value}({self.color.value})"


def build_deck() -> list[Card]:
    """Create the 48-card deck in generation order (unshuffled).

    For each color: Number 1-9, then Skip, Reverse, DrawTwo.
    No Wild cards are generated.
    """
    deck: list[Card] = []

    for color in COLORS:
        for rank in RANKS:
            deck.append(Card.number(color, rank))
        for kind in ACTION_KINDS:
            deck.append(Card(kind=kind, color=color))

    return deck


def shuffle_deck(deck: list[Card], rng: random.Random | None = None) -> None:
    """Shuffle the deck in place."""
    (rng or random.Random()).shuffle(deck)


def deal_hand(deck: list[Card], size: int = DEFAULT_HAND_SIZE) -> list[Card]:
    """Deal up to `size` cards from the top (end) of the deck.

    Args:
        deck: Deck to draw from (mutated).
        size: Number of cards to deal.

    Returns:
        New hand. Shorter than `size` if the deck runs out.
    """
    hand: list[Card] = []
    for _ in range(size):
        if not deck:
            break
        hand.append(deck.pop())
    return hand
