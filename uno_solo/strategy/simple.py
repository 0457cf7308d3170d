"""First-legal-card strategy.

Play the first legal card in hand order, otherwise draw. No hand
evaluation and no color preference.
"""

from uno_solo.game.validator import find_playable
from uno_solo.models.card import Card
from uno_solo.models.game_state import Action
from uno_solo.strategy.base import Strategy


class FirstLegalStrategy(Strategy):
    """Default opponent policy."""

    name = "first_legal"

    def choose_action(self, hand: list[Card], discard_pile: list[Card]) -> Action:
        if not discard_pile:
            return Action.DRAW
        if find_playable(hand, discard_pile[-1]) is None:
            return Action.DRAW
        return Action.DROP


class AlwaysDrawStrategy(Strategy):
    """Opponent that never plays. Useful for forcing deck exhaustion."""

    name = "always_draw"

    def choose_action(self, hand: list[Card], discard_pile: list[Card]) -> Action:
        return Action.DRAW


STRATEGIES: dict[str, type[Strategy]] = {
    FirstLegalStrategy.name: FirstLegalStrategy,
    AlwaysDrawStrategy.name: AlwaysDrawStrategy,
}


def get_strategy(name: str) -> Strategy:
    """Create a strategy by name.

    Raises:
        ValueError: If no strategy is registered under `name`.
    """
    try:
        return STRATEGIES[name]()
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown strategy {name!r} (known: {known})") from None
