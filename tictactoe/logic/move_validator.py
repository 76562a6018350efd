"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .player import Player
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def next_player(cells: Sequence[Optional[Player]]) -> Player:
    """X moves whenever both players have placed the same number of marks."""
    x_count = sum(1 for cell in cells if cell == Player.X)
    o_count = sum(1 for cell in cells if cell == Player.O)
    return Player.X if x_count == o_count else Player.O


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be 0-8
    2. Can only place on empty cells
    3. Players alternate, X first
    4. Game must not be over
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(
        self,
        cells: Sequence[Optional[Player]],
        index: int,
        player: Player
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            cells: The 9 board cells.
            index: Cell to mark (0-8).
            player: The player making the move.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if self.win_checker.evaluate(cells).is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # bool is an int subclass, but True is not a cell
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index <= 8:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-8."
            )

        if cells[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {cells[index].value}"
            )

        expected = next_player(cells)
        if player != expected:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's {expected.value}'s turn, not {player.value}'s!"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, cells: Sequence[Optional[Player]]) -> List[int]:
        """
        Get all valid moves for the side to move.

        Returns:
            List of empty cell indices, or [] if the game is over.
        """
        if self.win_checker.evaluate(cells).is_over:
            return []
        return [i for i, cell in enumerate(cells) if cell is None]
