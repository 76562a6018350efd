"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .player import Player


Cells = Sequence[Optional[Player]]
Line = Tuple[int, int, int]

# All possible winning lines, as cell indices (0-8, row-major)
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class GameStatus(Enum):
    """Terminal classification of a board."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    winner and line are only set when status is WIN.
    """
    status: GameStatus
    winner: Optional[Player] = None
    line: Optional[Line] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @classmethod
    def win(cls, player: Player, line: Line) -> "Outcome":
        return cls(GameStatus.WIN, player, line)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, cells: Cells) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            cells: The 9 board cells.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(cells)
        if line is None:
            return None
        return cells[line[0]]

    def get_winning_line(self, cells: Cells) -> Optional[Line]:
        """
        Get the first winning line, in WINNING_LINES order.

        Args:
            cells: The 9 board cells.

        Returns:
            The winning line as an index triple, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(cells, line) is not None:
                return line
        return None

    def _check_line(self, cells: Cells, line: Line) -> Optional[Player]:
        a, b, c = line
        mark = cells[a]
        if mark is not None and mark == cells[b] == cells[c]:
            return mark
        return None

    def check_draw(self, cells: Cells) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(cells) is not None:
            return False
        return all(cell is not None for cell in cells)

    def evaluate(self, cells: Cells) -> Outcome:
        """
        Classify the board as a win, a draw, or still in progress.

        Args:
            cells: The 9 board cells.

        Returns:
            The board's Outcome.
        """
        line = self.get_winning_line(cells)
        if line is not None:
            return Outcome.win(cells[line[0]], line)

        if all(cell is not None for cell in cells):
            return Outcome.draw()

        return Outcome.in_progress()
