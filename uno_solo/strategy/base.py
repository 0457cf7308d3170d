"""Base strategy class for the computer opponent.

Defines the interface that all opponent policies must implement.
"""

from abc import ABC, abstractmethod

from uno_solo.models.card import Card
from uno_solo.models.game_state import Action


class Strategy(ABC):
    """Abstract base class for opponent policies.

    The turn engine only asks for an action; which card gets played on
    DROP is decided by the engine's legality scan.
    """

    name = "base"

    @abstractmethod
    def choose_action(self, hand: list[Card], discard_pile: list[Card]) -> Action:
        """Decide what to do this turn.

        Args:
            hand: Opponent's current hand (must not be mutated)
            discard_pile: Discard pile, top card last (must not be mutated)

        Returns:
            Action.DROP to play a card, Action.DRAW to draw one
        """
        pass
