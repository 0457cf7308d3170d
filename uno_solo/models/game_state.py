"""Game state models."""

import random
from enum import Enum

from pydantic import BaseModel, Field

from .card import DEFAULT_HAND_SIZE, Card, build_deck, deal_hand, shuffle_deck


class Actor(str, Enum):
    """Who is acting on a turn."""

    PLAYER = "player"
    COMPUTER = "computer"


class Action(str, Enum):
    """Turn action. Values are the accepted prompt tokens."""

    DRAW = "draw"
    DROP = "drop"


class GameStatus(str, Enum):
    """Game loop state."""

    IN_PROGRESS = "in_progress"
    PLAYER_WON = "player_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class EmptyDiscardPileError(RuntimeError):
    """Raised when the discard pile has no top card."""


class GameSession(BaseModel):
    """All card piles of a single game.

    The deck top is the end of `deck`, the discard top is the end of
    `discard_pile`.
    """

    deck: list[Card] = Field(default_factory=list)
    player_hand: list[Card] = Field(default_factory=list)
    computer_hand: list[Card] = Field(default_factory=list)
    discard_pile: list[Card] = Field(default_factory=list)

    round_number: int = 0
    seed: int | None = None

    def hand_for(self, actor: Actor) -> list[Card]:
        """Get the hand owned by `actor`."""
        if actor == Actor.PLAYER:
            return self.player_hand
        return self.computer_hand

    @property
    def top_card(self) -> Card:
        """Top card of the discard pile."""
        if not self.discard_pile:
            raise EmptyDiscardPileError("Discard pile is empty")
        return self.discard_pile[-1]

    def total_cards(self) -> int:
        """Count cards across all piles (constant during a game)."""
        return (
            len(self.deck)
            + len(self.player_hand)
            + len(self.computer_hand)
            + len(self.discard_pile)
        )

    def __str__(self) -> str:
        return (
            f"Round {self.round_number}: deck={len(self.deck)} "
            f"player={len(self.player_hand)} computer={len(self.computer_hand)} "
            f"discard={len(self.discard_pile)}"
        )


def new_session(
    rng: random.Random | None = None,
    hand_size: int = DEFAULT_HAND_SIZE,
    seed: int | None = None,
) -> GameSession:
    """Build, shuffle and deal a fresh game.

    Args:
        rng: Random source for the shuffle. Created from `seed` if not given.
        hand_size: Cards dealt to each hand.
        seed: Seed recorded on the session (and used when `rng` is None).

    Returns:
        GameSession with both hands dealt and one card on the discard pile.
    """
    rng = rng or random.Random(seed)
    deck = build_deck()
    shuffle_deck(deck, rng)

    player_hand = deal_hand(deck, hand_size)
    computer_hand = deal_hand(deck, hand_size)
    if not deck:
        raise ValueError(f"Hand size {hand_size} leaves no card for the discard pile")
    discard_pile = [deck.pop()]

    return GameSession(
        deck=deck,
        player_hand=player_hand,
        computer_hand=computer_hand,
        discard_pile=discard_pile,
        seed=seed,
    )
