"""
Board state for TicTacToe.
Holds the 9 cells and detects when the game is over.
"""

from typing import Iterable, List, Optional, Tuple

from .errors import InvalidMove
from .move_validator import MoveValidator, next_player
from .player import Player
from .win_checker import Outcome, WinChecker


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

Snapshot = Tuple[Optional[Player], ...]

EMPTY_SNAPSHOT: Snapshot = (None,) * CELL_COUNT


def place_mark(cells: Snapshot, index: int, player: Player) -> Snapshot:
    """
    Return a new snapshot with player's mark at index.

    The input snapshot is left untouched. No rule checks are made;
    this is the search's trial move.
    """
    return cells[:index] + (player,) + cells[index + 1:]


def empty_cells(cells: Iterable[Optional[Player]]) -> List[int]:
    """Indices of all empty cells, lowest first."""
    return [i for i, cell in enumerate(cells) if cell is None]


class Board:
    """
    The 3x3 TicTacToe board.

    Cells are addressed 0-8 in row-major order:

         0 | 1 | 2
        ---+---+---
         3 | 4 | 5
        ---+---+---
         6 | 7 | 8

    An empty cell is None, otherwise the Player whose mark is there.
    Once evaluate() is no longer IN_PROGRESS the board refuses
    moves until reset().
    """

    def __init__(self, cells: Optional[Iterable[Optional[Player]]] = None):
        """
        Create a board.

        Args:
            cells: Optional starting cells (9 entries). Empty board if omitted.
        """
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        if cells is None:
            self._cells: List[Optional[Player]] = list(EMPTY_SNAPSHOT)
        else:
            self._cells = list(cells)
            if len(self._cells) != CELL_COUNT:
                raise ValueError(f"Board needs {CELL_COUNT} cells, got {len(self._cells)}")
            if any(cell is not None and not isinstance(cell, Player) for cell in self._cells):
                raise ValueError("Board cells must be None or a Player")

            # X moves first, so X has placed as many marks as O or one more
            marks_ahead = self._cells.count(Player.X) - self._cells.count(Player.O)
            if marks_ahead not in (0, 1):
                raise ValueError(f"X has {marks_ahead} more marks than O, must be 0 or 1")

    @property
    def cells(self) -> Snapshot:
        """Immutable snapshot of the 9 cells."""
        return tuple(self._cells)

    def __getitem__(self, index: int) -> Optional[Player]:
        return self._cells[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        marks = "".join(cell.value if cell else "." for cell in self._cells)
        return f"Board({marks!r})"

    def apply_move(self, index: int, player: Player) -> None:
        """
        Place player's mark at index.

        Args:
            index: Cell index (0-8).
            player: The player moving. Must be the side to move.

        Raises:
            InvalidMove: Index out of range, cell occupied, out of turn,
                or the game is already over. The board is unchanged.
        """
        result = self.validator.validate_move(self._cells, index, player)
        if not result.is_valid:
            raise InvalidMove(result.error_message, index)

        self._cells[index] = player

    def evaluate(self) -> Outcome:
        """Classify the board as a win, a draw, or still in progress."""
        return self.win_checker.evaluate(self._cells)

    def reset(self):
        """Clear all 9 cells."""
        self._cells = list(EMPTY_SNAPSHOT)

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells, lowest first."""
        return empty_cells(self._cells)

    def next_player(self) -> Player:
        """The player whose turn it is."""
        return next_player(self._cells)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(self._cells)

    def render(self) -> str:
        """
        Draw the board as text.

        Empty cells show their 1-9 number so a human can pick them.
        """
        rows = []
        for row in range(BOARD_SIZE):
            marks = []
            for col in range(BOARD_SIZE):
                index = row * BOARD_SIZE + col
                cell = self._cells[index]
                marks.append(cell.value if cell else str(index + 1))
            rows.append(" " + " | ".join(marks))
        return "\n---+---+---\n".join(rows)
