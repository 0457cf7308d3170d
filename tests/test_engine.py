"""Tests for the turn engine and game loop."""

import io
import random

import pytest

from uno_solo.game.engine import (
    INVALID_INPUT,
    PROMPT,
    GameLoop,
    Outcome,
    TurnEngine,
    evaluate,
    parse_action,
)
from uno_solo.models.card import Card, Color
from uno_solo.models.game_state import (
    Action,
    Actor,
    EmptyDiscardPileError,
    GameSession,
    GameStatus,
    new_session,
)
from uno_solo.strategy.simple import AlwaysDrawStrategy, FirstLegalStrategy
from uno_solo.utils.logger import GameDisplay


def make_reader(lines):
    """Return a read_line callable that replays `lines`."""
    it = iter(lines)

    def read_line():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def display(output):
    return GameDisplay(stream=output)


class TestNewSession:
    """Tests for session setup."""

    def test_fresh_deal(self):
        """Test deck has 33 cards after dealing 7 + 7 and seeding the discard."""
        session = new_session(random.Random(1))
        assert len(session.player_hand) == 7
        assert len(session.computer_hand) == 7
        assert len(session.discard_pile) == 1
        assert len(session.deck) == 33
        assert session.total_cards() == 48

    def test_seeded_sessions_match(self):
        """Test that a seed reproduces the deal."""
        assert new_session(seed=5) == new_session(seed=5)

    def test_hand_size_too_large(self):
        """Test that a deal leaving no discard card is rejected."""
        with pytest.raises(ValueError):
            new_session(random.Random(1), hand_size=24)

    def test_top_card_empty_pile(self):
        """Test top_card on an empty discard pile."""
        with pytest.raises(EmptyDiscardPileError):
            GameSession().top_card


class TestTurnEngine:
    """Tests for TurnEngine."""

    def test_draw(self):
        """Test drawing moves the deck top into the hand."""
        session = GameSession(
            deck=[Card.number(Color.RED, 1), Card.number(Color.RED, 2)],
            player_hand=[],
            discard_pile=[Card.skip(Color.BLUE)],
        )
        result = TurnEngine(session).draw(Actor.PLAYER)

        assert result.outcome == Outcome.DREW
        assert result.card == Card.number(Color.RED, 2)
        assert session.player_hand == [Card.number(Color.RED, 2)]
        assert session.deck == [Card.number(Color.RED, 1)]
        assert result.message == "You drew a card: Number(Red, 2)"

    def test_draw_empty_deck_repeated(self):
        """Test drawing from an empty deck never changes the hand."""
        hand = [Card.number(Color.GREEN, 4)]
        session = GameSession(player_hand=hand, discard_pile=[Card.wild()])
        engine = TurnEngine(session)

        for _ in range(5):
            result = engine.draw(Actor.PLAYER)
            assert result.outcome == Outcome.DECK_EMPTY
            assert result.card is None
            assert result.message == "The deck is empty!"

        assert session.player_hand == hand
        assert session.deck == []

    def test_play_first_legal(self):
        """Test playing removes the first legal card by index."""
        session = GameSession(
            deck=[Card.number(Color.RED, 9)],
            player_hand=[
                Card.number(Color.RED, 1),
                Card.skip(Color.BLUE),
                Card.skip(Color.BLUE),
            ],
            discard_pile=[Card.skip(Color.BLUE)],
        )
        result = TurnEngine(session).play(Actor.PLAYER)

        assert result.outcome == Outcome.PLAYED
        assert result.card == Card.skip(Color.BLUE)
        assert session.player_hand == [Card.number(Color.RED, 1), Card.skip(Color.BLUE)]
        assert session.discard_pile == [Card.skip(Color.BLUE), Card.skip(Color.BLUE)]
        assert session.deck == [Card.number(Color.RED, 9)]
        assert result.message == "You played: Skip(Blue)"

    def test_play_falls_back_to_draw(self):
        """Test no legal card means drawing one, discard unchanged."""
        session = GameSession(
            deck=[Card.number(Color.YELLOW, 7)],
            player_hand=[Card.number(Color.RED, 2)],
            discard_pile=[Card.skip(Color.BLUE)],
        )
        result = TurnEngine(session).play(Actor.PLAYER)

        assert result.outcome == Outcome.DREW
        assert result.fallback
        assert result.action == Action.DROP
        assert len(session.player_hand) == 2
        assert session.discard_pile == [Card.skip(Color.BLUE)]
        assert session.deck == []
        assert result.message.startswith("No valid cards to play.")

    def test_play_fallback_empty_deck(self):
        """Test fallback with an empty deck is a no-op."""
        session = GameSession(
            player_hand=[Card.number(Color.RED, 2)],
            discard_pile=[Card.skip(Color.BLUE)],
        )
        result = TurnEngine(session).play(Actor.PLAYER)

        assert result.outcome == Outcome.DECK_EMPTY
        assert session.player_hand == [Card.number(Color.RED, 2)]
        assert session.discard_pile == [Card.skip(Color.BLUE)]

    def test_computer_messages(self):
        """Test messages for the computer's actions."""
        session = GameSession(
            deck=[Card.number(Color.RED, 5)],
            computer_hand=[Card.wild()],
            discard_pile=[Card.number(Color.BLUE, 1)],
        )
        engine = TurnEngine(session)

        assert engine.play(Actor.COMPUTER).message == "Computer played: Wild"
        assert engine.draw(Actor.COMPUTER).message == "Computer drew a card: Number(Red, 5)"

    def test_conservation(self):
        """Test card count stays at 48 across many random actions."""
        rng = random.Random(3)
        session = new_session(rng)
        engine = TurnEngine(session)

        for _ in range(200):
            actor = rng.choice([Actor.PLAYER, Actor.COMPUTER])
            action = rng.choice([Action.DRAW, Action.DROP])
            engine.apply(actor, action)
            assert session.total_cards() == 48
            assert session.discard_pile


class TestEvaluate:
    """Tests for terminal condition precedence."""

    def test_in_progress(self):
        session = GameSession(
            deck=[Card.wild()],
            player_hand=[Card.wild()],
            computer_hand=[Card.wild()],
        )
        assert evaluate(session) == GameStatus.IN_PROGRESS

    def test_player_first(self):
        """Test player-empty wins over computer-empty and deck-empty."""
        session = GameSession(deck=[], player_hand=[], computer_hand=[])
        assert evaluate(session) == GameStatus.PLAYER_WON

    def test_computer_before_deck(self):
        """Test computer-empty wins over deck-empty."""
        session = GameSession(deck=[], player_hand=[Card.wild()], computer_hand=[])
        assert evaluate(session) == GameStatus.COMPUTER_WON

    def test_deck_empty(self):
        session = GameSession(
            deck=[],
            player_hand=[Card.wild()],
            computer_hand=[Card.wild()],
        )
        assert evaluate(session) == GameStatus.DRAW


class TestParseAction:
    """Tests for prompt parsing."""

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("draw", Action.DRAW),
            ("drop", Action.DROP),
            ("  drop \n", Action.DROP),
            ("Draw", None),
            ("DROP", None),
            ("", None),
            ("play", None),
        ],
    )
    def test_parse(self, line, expected):
        assert parse_action(line) == expected


class TestGameLoop:
    """Tests for GameLoop scenarios."""

    def test_player_wins(self, display, output):
        """Test playing the last card wins the game."""
        session = GameSession(
            deck=[Card.number(Color.RED, 1), Card.number(Color.RED, 2)],
            player_hand=[Card.number(Color.BLUE, 5)],
            computer_hand=[Card.number(Color.GREEN, 8)],
            discard_pile=[Card.number(Color.BLUE, 5)],
        )
        loop = GameLoop(session, FirstLegalStrategy(), display, make_reader(["drop"]))

        assert loop.run() == GameStatus.PLAYER_WON
        assert session.player_hand == []
        assert "Congratulations! You won!" in output.getvalue()

    def test_computer_wins(self, display, output):
        """Test opponent emptying its hand."""
        session = GameSession(
            deck=[Card.number(Color.RED, 1), Card.number(Color.RED, 2)],
            player_hand=[Card.number(Color.YELLOW, 3)],
            computer_hand=[Card.wild()],
            discard_pile=[Card.number(Color.BLUE, 5)],
        )
        loop = GameLoop(session, FirstLegalStrategy(), display, make_reader(["draw"]))

        assert loop.run() == GameStatus.COMPUTER_WON
        assert "Sorry, you lost. The computer won!" in output.getvalue()

    def test_last_card_drawn_is_draw(self, display, output):
        """Test drawing the last deck card ends the round in a draw."""
        session = GameSession(
            deck=[Card.number(Color.RED, 1)],
            player_hand=[Card.number(Color.YELLOW, 3)],
            computer_hand=[Card.number(Color.GREEN, 4)],
            discard_pile=[Card.skip(Color.BLUE)],
        )
        loop = GameLoop(session, FirstLegalStrategy(), display, make_reader(["draw"]))

        assert loop.run() == GameStatus.DRAW
        assert session.deck == []
        assert len(session.player_hand) == 2
        text = output.getvalue()
        assert "The deck is empty!" in text
        assert "The deck is empty. The game is a draw." in text

    def test_invalid_input_reprompts(self, display, output):
        """Test invalid input does not consume a turn."""
        session = GameSession(
            deck=[Card.number(Color.RED, 1), Card.number(Color.RED, 2)],
            player_hand=[Card.number(Color.BLUE, 5)],
            computer_hand=[Card.number(Color.GREEN, 8)],
            discard_pile=[Card.number(Color.BLUE, 5)],
        )
        loop = GameLoop(
            session, FirstLegalStrategy(), display, make_reader(["Drop", "x", "drop"])
        )

        assert loop.run() == GameStatus.PLAYER_WON
        assert session.round_number == 1
        text = output.getvalue()
        assert text.count(PROMPT) == 3
        assert text.count(INVALID_INPUT) == 2

    def test_display_shows_hand_and_top(self, display, output):
        """Test the hand and top card are shown before the prompt."""
        session = GameSession(
            deck=[Card.number(Color.RED, 1), Card.number(Color.RED, 2)],
            player_hand=[Card.number(Color.BLUE, 5), Card.skip(Color.RED)],
            computer_hand=[Card.number(Color.GREEN, 8)],
            discard_pile=[Card.number(Color.BLUE, 5)],
        )
        loop = GameLoop(
            session, AlwaysDrawStrategy(), display, make_reader(["drop", "drop"])
        )
        loop.run()

        lines = output.getvalue().splitlines()
        assert lines[0] == "Your hand:"
        assert lines[1] == "  Number(Blue, 5)"
        assert lines[2] == "  Skip(Red)"
        assert lines[3] == "Top card: Number(Blue, 5)"
        assert lines[4] == PROMPT

    def test_read_failure_propagates(self, display):
        """Test that an input failure ends the loop with the error."""
        session = new_session(random.Random(0))
        loop = GameLoop(session, FirstLegalStrategy(), display, make_reader([]))

        with pytest.raises(EOFError):
            loop.run()

    def test_round_callback(self, display):
        """Test on_turn is called for both actors each round."""
        session = new_session(random.Random(11))
        loop = GameLoop(session, FirstLegalStrategy(), display)
        results = []
        loop.set_callbacks(on_turn=results.append)

        loop.play_round(Action.DRAW)

        assert [r.actor for r in results] == [Actor.PLAYER, Actor.COMPUTER]
        assert session.round_number == 1

    def test_full_game_terminates(self, display):
        """Test a whole game with the player always dropping."""
        session = new_session(random.Random(2024))
        loop = GameLoop(session, FirstLegalStrategy(), display, lambda: "drop")

        status = loop.run()

        assert status.is_terminal
        assert status == evaluate(session)
        assert session.total_cards() == 48

    def test_no_rounds_after_terminal(self, display):
        """Test play_round does nothing once the game is over."""
        session = GameSession(
            deck=[Card.number(Color.RED, 1), Card.number(Color.RED, 2)],
            player_hand=[Card.number(Color.BLUE, 5)],
            computer_hand=[Card.number(Color.GREEN, 8)],
            discard_pile=[Card.number(Color.BLUE, 5)],
        )
        loop = GameLoop(session, FirstLegalStrategy(), display)

        assert loop.play_round(Action.DROP) == GameStatus.PLAYER_WON
        assert loop.play_round(Action.DRAW) == GameStatus.PLAYER_WON
        assert session.round_number == 1
        assert session.deck == [Card.number(Color.RED, 1)]
