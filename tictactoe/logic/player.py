"""
Players for TicTacToe.
"""

from enum import Enum


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    # Aliases by turn order
    FIRST = "X"
    SECOND = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X
