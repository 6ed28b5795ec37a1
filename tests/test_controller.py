# Area: Controller Tests
"""Tests for GameController."""

from unittest.mock import Mock

import pytest

from rps_duel import GameController, Move, Outcome, Player, Result, RoundPhase, Status, StatusKind

ALL_MOVES = (Move.ROCK, Move.PAPER, Move.SCISSORS)


@pytest.fixture
def game():
    return GameController()


def play(game, first, second):
    game.choose(first, Player.ONE)
    game.choose(second, Player.TWO)


class TestFreshRound:
    """Tests for a new controller and for reset()."""

    def test_player_one_is_offered_all_moves(self, game):
        assert game.allowed_moves(Player.ONE) == ALL_MOVES
        assert game.allowed_moves(Player.TWO) == ()

    def test_nothing_is_revealed(self, game):
        assert game.is_complete() is False
        assert game.revealed_move(Player.ONE) is None
        assert game.revealed_move(Player.TWO) is None

    def test_statuses(self, game):
        assert game.status(Player.ONE) == Status(StatusKind.YOUR_TURN)
        assert game.status(Player.TWO) == Status(StatusKind.WAITING)

    def test_reset_after_complete_round(self, game):
        play(game, Move.ROCK, Move.PAPER)
        game.reset()
        assert game.is_complete() is False
        assert game.revealed_move(Player.ONE) is None
        assert game.revealed_move(Player.TWO) is None
        assert game.allowed_moves(Player.ONE) == ALL_MOVES
        assert game.allowed_moves(Player.TWO) == ()
        assert game.phase == RoundPhase.EMPTY

    def test_reset_mid_round(self, game):
        game.choose(Move.ROCK, Player.ONE)
        game.reset()
        assert game.active_player == Player.ONE
        assert game.allowed_moves(Player.ONE) == ALL_MOVES


class TestTurnTaking:
    """Tests for the Empty -> OneChosen -> Complete flow."""

    def test_after_player_one_chooses(self, game):
        game.choose(Move.ROCK, Player.ONE)
        assert game.allowed_moves(Player.ONE) == ()
        assert game.allowed_moves(Player.TWO) == ALL_MOVES
        assert game.is_complete() is False
        assert game.phase == RoundPhase.ONE_CHOSEN

    def test_moves_hidden_until_complete(self, game):
        game.choose(Move.ROCK, Player.ONE)
        assert game.revealed_move(Player.ONE) is None
        assert game.status(Player.ONE) == Status(StatusKind.WAITING)
        assert game.status(Player.TWO) == Status(StatusKind.YOUR_TURN)

    def test_rock_beats_scissors(self, game):
        play(game, Move.ROCK, Move.SCISSORS)
        assert game.is_complete() is True
        assert game.evaluate_result() == Result.WIN
        assert game.status(Player.ONE) == Status.finished(Outcome.WIN)
        assert game.status(Player.TWO) == Status.finished(Outcome.LOSE)
        assert game.revealed_move(Player.ONE) == Move.ROCK
        assert game.revealed_move(Player.TWO) == Move.SCISSORS

    def test_player_two_wins(self, game):
        play(game, Move.ROCK, Move.PAPER)
        assert game.evaluate_result() == Result.LOSS
        assert game.status(Player.ONE) == Status.finished(Outcome.LOSE)
        assert game.status(Player.TWO) == Status.finished(Outcome.WIN)

    def test_paper_draw(self, game):
        play(game, Move.PAPER, Move.PAPER)
        assert game.evaluate_result() == Result.DRAW
        assert game.status(Player.ONE) == Status.finished(Outcome.DRAW)
        assert game.status(Player.TWO) == Status.finished(Outcome.DRAW)

    def test_no_moves_offered_once_complete(self, game):
        play(game, Move.PAPER, Move.ROCK)
        assert game.allowed_moves(Player.ONE) == ()
        assert game.allowed_moves(Player.TWO) == ()

    def test_choose_after_complete_is_ignored(self, game):
        play(game, Move.ROCK, Move.SCISSORS)
        game.choose(Move.PAPER, Player.ONE)
        game.choose(Move.ROCK, Player.TWO)
        assert game.revealed_move(Player.ONE) == Move.ROCK
        assert game.revealed_move(Player.TWO) == Move.SCISSORS


class TestSoftAndStrictGate:
    """Tests for out-of-turn choices."""

    def test_soft_gate_accepts_out_of_turn_choice(self, game):
        game.choose(Move.PAPER, Player.TWO)
        assert game.phase == RoundPhase.ONE_CHOSEN
        game.choose(Move.SCISSORS, Player.ONE)
        assert game.is_complete() is True
        assert game.revealed_move(Player.TWO) == Move.PAPER

    def test_strict_gate_ignores_out_of_turn_choice(self):
        game = GameController(strict_turns=True)
        game.choose(Move.PAPER, Player.TWO)
        assert game.phase == RoundPhase.EMPTY
        assert game.allowed_moves(Player.ONE) == ALL_MOVES

    def test_strict_gate_ignores_second_choice_from_same_player(self):
        game = GameController(strict_turns=True)
        game.choose(Move.ROCK, Player.ONE)
        game.choose(Move.PAPER, Player.ONE)
        game.choose(Move.SCISSORS, Player.TWO)
        assert game.revealed_move(Player.ONE) == Move.ROCK

    def test_strict_gate_allows_normal_play(self):
        game = GameController(strict_turns=True)
        play(game, Move.SCISSORS, Move.PAPER)
        assert game.evaluate_result() == Result.WIN


class TestSubscribe:
    """Tests for change notification."""

    def test_listener_called_after_each_mutation(self, game):
        listener = Mock()
        game.subscribe(listener)

        game.choose(Move.ROCK, Player.ONE)
        game.choose(Move.PAPER, Player.TWO)
        game.reset()

        assert listener.call_count == 3
        listener.assert_called_with(game)

    def test_listener_sees_consistent_state(self, game):
        seen = []
        game.subscribe(lambda g: seen.append((g.phase, g.revealed_move(Player.ONE))))

        play(game, Move.ROCK, Move.SCISSORS)

        assert seen == [
            (RoundPhase.ONE_CHOSEN, None),
            (RoundPhase.COMPLETE, Move.ROCK),
        ]

    def test_unsubscribe_stops_notifications(self, game):
        listener = Mock()
        unsubscribe = game.subscribe(listener)
        unsubscribe()
        game.choose(Move.ROCK, Player.ONE)
        listener.assert_not_called()

    def test_unsubscribe_twice_is_harmless(self, game):
        unsubscribe = game.subscribe(Mock())
        unsubscribe()
        unsubscribe()

    def test_listener_errors_propagate(self, game):
        game.subscribe(Mock(side_effect=RuntimeError("boom")))
        with pytest.raises(RuntimeError):
            game.choose(Move.ROCK, Player.ONE)
        # The choice itself was already recorded
        assert game.phase == RoundPhase.ONE_CHOSEN


class TestUndefinedFallback:
    """Tests for the defensive UNDEFINED status."""

    def test_complete_round_without_result_is_undefined(self, game, monkeypatch):
        play(game, Move.ROCK, Move.PAPER)
        monkeypatch.setattr(game._state, "evaluate_result", lambda: None)
        assert game.status(Player.ONE) == Status(StatusKind.UNDEFINED)
