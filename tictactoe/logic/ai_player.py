"""
AI player for TicTacToe.
Picks the computer's move at one of three strength tiers.
"""

import logging
import random
from enum import Enum
from functools import lru_cache
from typing import Optional, Union

from .board import Board, Snapshot, empty_cells, place_mark
from .errors import NoLegalMove
from .player import Player
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

# Score of an immediate win; depth is subtracted so faster wins score higher
WIN_SCORE = 10

# Chance that a Medium move is played at random instead of optimally
MEDIUM_RANDOM_CHANCE = 0.5

_win_checker = WinChecker()


class Difficulty(Enum):
    """Strength tiers of the computer opponent."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@lru_cache(maxsize=None)
def _minimax(cells: Snapshot, computer: Player, depth: int, is_maximizing: bool) -> int:
    """
    Score a position by exhaustive Minimax search.

    Args:
        cells: Board snapshot to score.
        computer: The player the search is maximizing for.
        depth: Plies played since the top-level trial move.
        is_maximizing: True if the computer is to move.

    Returns:
        WIN_SCORE - depth for a computer win, depth - WIN_SCORE for a
        loss, 0 for a draw.
    """
    winner = _win_checker.check_winner(cells)
    if winner == computer:
        return WIN_SCORE - depth
    if winner is not None:
        return depth - WIN_SCORE

    moves = empty_cells(cells)
    if not moves:
        return 0

    if is_maximizing:
        best = float('-inf')
        for index in moves:
            score = _minimax(place_mark(cells, index, computer), computer, depth + 1, False)
            best = max(best, score)
        return best
    else:
        best = float('inf')
        opponent = computer.opposite()
        for index in moves:
            score = _minimax(place_mark(cells, index, opponent), computer, depth + 1, True)
            best = min(best, score)
        return best


class AIPlayer:
    """
    The computer opponent.

    - EASY: a random empty cell.
    - MEDIUM: a coin flip on every move between EASY and HARD.
    - HARD: Minimax. Wins if possible, blocks if needed, never loses.
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = Difficulty.HARD,
        player: Optional[Player] = None,
        rng: Optional[random.Random] = None,
        medium_random_chance: float = MEDIUM_RANDOM_CHANCE
    ):
        """
        Initialize the AI player.

        Args:
            difficulty: Strength tier (Difficulty or its string value).
            player: Which player the AI controls. None plays the side
                to move on each board.
            rng: Random source. Defaults to a fresh unseeded generator.
            medium_random_chance: Probability that a MEDIUM move is random.
        """
        self.difficulty = Difficulty(difficulty)
        self.player = player
        self.rng = rng if rng is not None else random.Random()
        self.medium_random_chance = medium_random_chance

    def choose_move(self, board: Board) -> int:
        """
        Choose the computer's move.

        Args:
            board: Current board. Not modified.

        Returns:
            Index (0-8) of the chosen empty cell.

        Raises:
            NoLegalMove: The game is over or the board is full.
        """
        if board.evaluate().is_over:
            raise NoLegalMove("Game is already over, no move to choose")

        cells = board.cells
        moves = empty_cells(cells)
        if not moves:
            raise NoLegalMove("Board is full, no move to choose")

        player = self.player if self.player is not None else board.next_player()

        if self.difficulty == Difficulty.EASY:
            move = self.random_move(cells)
        elif self.difficulty == Difficulty.MEDIUM:
            if self.rng.random() < self.medium_random_chance:
                move = self.random_move(cells)
            else:
                move = self.best_move(cells, player)
        else:
            move = self.best_move(cells, player)

        logger.debug("AI (%s) plays %d on %r", self.difficulty.value, move, board)
        return move

    def random_move(self, cells: Snapshot) -> int:
        """Pick uniformly among the empty cells."""
        return self.rng.choice(empty_cells(cells))

    def best_move(self, cells: Snapshot, computer: Player) -> int:
        """
        Get the best move for computer using Minimax.

        Ties go to the lowest index.

        Args:
            cells: Board snapshot with at least one empty cell.
            computer: The player to find a move for.

        Returns:
            Index of the best move.
        """
        best_score = float('-inf')
        best_move = None

        for index in empty_cells(cells):
            score = _minimax(place_mark(cells, index, computer), computer, 0, False)
            if score > best_score:
                best_score = score
                best_move = index

        logger.debug("Minimax best move for %s: %s (score: %s)", computer.value, best_move, best_score)
        return best_move


def choose_move(
    board: Board,
    difficulty: Union[Difficulty, str],
    player: Optional[Player] = None,
    rng: Optional[random.Random] = None
) -> int:
    """
    Choose the computer's move for board at the given difficulty.

    Shortcut for AIPlayer(difficulty, player, rng).choose_move(board).
    """
    return AIPlayer(difficulty, player, rng).choose_move(board)
