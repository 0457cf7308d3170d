"""Turn engine and game loop."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from uno_solo.models.card import Card
from uno_solo.models.game_state import Action, Actor, GameSession, GameStatus

from .validator import find_playable

if TYPE_CHECKING:
    from uno_solo.logging import GameLogger
    from uno_solo.strategy.base import Strategy
    from uno_solo.utils.logger import GameDisplay

logger = logging.getLogger(__name__)

PROMPT = "Enter 'draw' to draw a card or 'drop' to play a card:"
INVALID_INPUT = "Invalid input. Try again."


class Outcome(str, Enum):
    """What a turn action actually did."""

    DREW = "drew"
    PLAYED = "played"
    DECK_EMPTY = "deck_empty"


@dataclass(frozen=True)
class TurnResult:
    """Result of a single draw or play."""

    actor: Actor
    action: Action
    outcome: Outcome
    card: Card | None = None
    fallback: bool = False  # DROP with no legal card turned into a draw

    @property
    def message(self) -> str:
        """Human-readable report of the action."""
        if self.outcome == Outcome.DECK_EMPTY:
            if self.fallback and self.actor == Actor.PLAYER:
                return "No valid cards to play. The deck is empty!"
            return "The deck is empty!"

        if self.actor == Actor.PLAYER:
            if self.outcome == Outcome.PLAYED:
                return f"You played: {self.card}"
            if self.fallback:
                return f"No valid cards to play. You drew a card: {self.card}"
            return f"You drew a card: {self.card}"

        if self.outcome == Outcome.PLAYED:
            return f"Computer played: {self.card}"
        return f"Computer drew a card: {self.card}"


class TurnEngine:
    """Applies draw/play actions to a game session."""

    def __init__(self, session: GameSession):
        """Initialize turn engine.

        Args:
            session: Game session to mutate
        """
        self.session = session

    def draw(self, actor: Actor, action: Action = Action.DRAW) -> TurnResult:
        """Move the deck top into the actor's hand.

        An empty deck leaves everything untouched and reports DECK_EMPTY.
        """
        deck = self.session.deck
        fallback = action == Action.DROP

        if not deck:
            logger.debug(f"{actor.value} tried to draw from an empty deck")
            return TurnResult(actor, action, Outcome.DECK_EMPTY, fallback=fallback)

        card = deck.pop()
        self.session.hand_for(actor).append(card)
        logger.debug(f"{actor.value} drew {card} ({len(deck)} left in deck)")
        return TurnResult(actor, action, Outcome.DREW, card, fallback=fallback)

    def play(self, actor: Actor) -> TurnResult:
        """Play the first legal card from the actor's hand.

        Falls back to drawing a card when nothing in hand is playable.
        """
        hand = self.session.hand_for(actor)
        index = find_playable(hand, self.session.top_card)

        if index is None:
            logger.debug(f"{actor.value} has no legal card on {self.session.top_card}")
            return self.draw(actor, Action.DROP)

        card = hand.pop(index)
        self.session.discard_pile.append(card)
        logger.debug(f"{actor.value} played {card} ({len(hand)} left in hand)")
        return TurnResult(actor, Action.DROP, Outcome.PLAYED, card)

    def apply(self, actor: Actor, action: Action) -> TurnResult:
        """Dispatch an action."""
        if action == Action.DRAW:
            return self.draw(actor)
        return self.play(actor)


def evaluate(session: GameSession) -> GameStatus:
    """Check terminal conditions.

    Precedence: player hand empty, then computer hand empty, then deck empty.
    """
    if not session.player_hand:
        return GameStatus.PLAYER_WON
    if not session.computer_hand:
        return GameStatus.COMPUTER_WON
    if not session.deck:
        return GameStatus.DRAW
    return GameStatus.IN_PROGRESS


def parse_action(line: str) -> Action | None:
    """Parse a prompt reply. Exact, case-sensitive match after trimming."""
    token = line.strip()
    for action in Action:
        if token == action.value:
            return action
    return None


class GameLoop:
    """Runs rounds of human action followed by the opponent's action."""

    def __init__(
        self,
        session: GameSession,
        strategy: Strategy,
        display: GameDisplay,
        read_line: Callable[[], str] | None = None,
        game_logger: GameLogger | None = None,
    ):
        """Initialize game loop.

        Args:
            session: Game session (already dealt)
            strategy: Opponent policy
            display: Console output
            read_line: Returns one line of user input, defaults to input()
            game_logger: GameLogger instance for the JSONL game log
        """
        self.session = session
        self.strategy = strategy
        self.display = display
        self.read_line = read_line or input
        self.game_logger = game_logger

        self.engine = TurnEngine(session)
        self.status = GameStatus.IN_PROGRESS

        self._on_turn: Callable[[TurnResult], None] | None = None

    def set_callbacks(self, on_turn: Callable[[TurnResult], None] | None = None) -> None:
        """Set event callbacks.

        Args:
            on_turn: Called after every applied action
        """
        self._on_turn = on_turn

    def ask_player(self) -> Action:
        """Prompt until the player enters a valid action."""
        while True:
            self.display.print_line(PROMPT)
            action = parse_action(self.read_line())
            if action is not None:
                return action
            self.display.print_line(INVALID_INPUT)

    def play_round(self, action: Action) -> GameStatus:
        """Apply the player's action, then the opponent's, then evaluate.

        Args:
            action: Player's chosen action

        Returns:
            Status after the round
        """
        if self.status.is_terminal:
            return self.status

        self.session.round_number += 1

        self._record(self.engine.apply(Actor.PLAYER, action))

        opponent_action = self.strategy.choose_action(
            list(self.session.computer_hand),
            list(self.session.discard_pile),
        )
        self._record(self.engine.apply(Actor.COMPUTER, opponent_action))

        self.status = evaluate(self.session)
        return self.status

    def run(self) -> GameStatus:
        """Play until a terminal state is reached.

        Returns:
            Final status
        """
        if self.game_logger:
            self.game_logger.log_game_start(self.session)

        while not self.status.is_terminal:
            self.display.print_game_state(self.session.player_hand, self.session.top_card)
            self.play_round(self.ask_player())

        logger.info(f"Game over after {self.session.round_number} rounds: {self.status.value}")
        self.display.print_outcome(self.status)

        if self.game_logger:
            self.game_logger.log_game_end(self.session, self.status)

        return self.status

    def _record(self, result: TurnResult) -> None:
        self.display.print_line(result.message)

        if self.game_logger:
            self.game_logger.log_turn(self.session, result)

        if self._on_turn:
            self._on_turn(result)
