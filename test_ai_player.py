"""
Tests for the AI player.
"""

import random

import pytest

from tictactoe.logic import (
    AIPlayer,
    Board,
    Difficulty,
    GameStatus,
    NoLegalMove,
    Player,
    choose_move,
)

X, O = Player.X, Player.O


class ScriptedRandom:
    """Random source that returns preset coin flips and always picks the last choice."""

    def __init__(self, flips):
        self.flips = list(flips)

    def random(self):
        return self.flips.pop(0)

    def choice(self, seq):
        return seq[-1]


def play_out(x_ai, o_ai):
    """Play a full game between two AIs and return the final board."""
    board = Board()
    while not board.evaluate().is_over:
        ai = x_ai if board.next_player() == X else o_ai
        board.apply_move(ai.choose_move(board), board.next_player())
    return board


def test_hard_blocks_or_wins_on_pending_line():
    # O can win at 5; X also threatens 2
    board = Board([X, X, None,
                   O, O, None,
                   None, None, None])
    assert choose_move(board, Difficulty.HARD, player=O) == 5


def test_hard_answers_corner_opening_with_center():
    board = Board()
    board.apply_move(0, X)
    assert choose_move(board, Difficulty.HARD) == 4


def test_hard_takes_the_win():
    board = Board([O, O, None,
                   X, X, None,
                   X, None, None])
    assert choose_move(board, "hard") == 2


def test_hard_blocks_the_opponent():
    board = Board([X, X, None,
                   None, O, None,
                   None, None, None])
    assert choose_move(board, Difficulty.HARD) == 2


def test_hard_prefers_lowest_index_on_empty_board():
    # Every opening is a draw with perfect play
    assert choose_move(Board(), Difficulty.HARD) == 0


def test_hard_prefers_faster_win():
    # 6 wins at once; 0 forks and wins a move later
    board = Board([None, X, O,
                   X, O, X,
                   None, None, None])
    assert AIPlayer(Difficulty.HARD).choose_move(board) == 6


def test_choose_move_does_not_modify_board():
    board = Board()
    board.apply_move(0, X)
    before = board.cells
    AIPlayer(Difficulty.HARD).choose_move(board)
    assert board.cells == before


def test_easy_picks_uniformly_among_empty_cells():
    board = Board([X, O, X,
                   None, O, None,
                   None, X, None])
    ai = AIPlayer(Difficulty.EASY, rng=random.Random(7))

    picks = {ai.choose_move(board) for _ in range(200)}

    assert picks == {3, 5, 6, 8}


def test_medium_flips_a_coin_every_move():
    board = Board()
    board.apply_move(0, X)
    # 0.9: play best, 0.1: play random (ScriptedRandom picks the last empty cell)
    ai = AIPlayer(Difficulty.MEDIUM, rng=ScriptedRandom([0.9, 0.1, 0.9]))

    assert ai.choose_move(board) == 4
    assert ai.choose_move(board) == 8
    assert ai.choose_move(board) == 4


def test_medium_random_chance_bounds():
    board = Board()
    board.apply_move(0, X)

    always_best = AIPlayer(Difficulty.MEDIUM, rng=random.Random(1), medium_random_chance=0.0)
    assert {always_best.choose_move(board) for _ in range(20)} == {4}

    always_random = AIPlayer(Difficulty.MEDIUM, rng=random.Random(1), medium_random_chance=1.0)
    assert len({always_random.choose_move(board) for _ in range(200)}) > 1


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_no_legal_move_on_full_board(difficulty):
    board = Board([X, O, X,
                   X, O, O,
                   O, X, X])
    with pytest.raises(NoLegalMove):
        choose_move(board, difficulty)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_no_legal_move_after_win(difficulty):
    board = Board([X, X, X,
                   O, O, None,
                   None, None, None])
    with pytest.raises(NoLegalMove):
        choose_move(board, difficulty)


def test_unknown_difficulty_is_rejected():
    with pytest.raises(ValueError):
        AIPlayer("impossible")


def test_hard_vs_hard_is_a_draw():
    board = play_out(AIPlayer(Difficulty.HARD), AIPlayer(Difficulty.HARD))
    assert board.evaluate().status == GameStatus.DRAW


def winners_against_every_reply(board, hard):
    """Play hard against every possible opponent reply; return the set of winners reached."""
    outcome = board.evaluate()
    if outcome.is_over:
        return {outcome.winner}

    player = board.next_player()
    if player == hard.player:
        replies = [hard.choose_move(board)]
    else:
        replies = board.empty_cells()

    winners = set()
    for index in replies:
        child = board.copy()
        child.apply_move(index, player)
        winners |= winners_against_every_reply(child, hard)
    return winners


@pytest.mark.parametrize("hard_player", [X, O])
def test_hard_never_loses_to_any_sequence_of_moves(hard_player):
    # Covers every game an Easy opponent could produce
    hard = AIPlayer(Difficulty.HARD, player=hard_player)

    winners = winners_against_every_reply(Board(), hard)

    assert hard_player.opposite() not in winners
    assert hard_player in winners


@pytest.mark.parametrize("seed", range(10))
def test_hard_never_loses_to_medium(seed):
    medium = AIPlayer(Difficulty.MEDIUM, rng=random.Random(seed))
    hard = AIPlayer(Difficulty.HARD)

    assert play_out(medium, hard).evaluate().winner != X
    assert play_out(hard, medium).evaluate().winner != O
