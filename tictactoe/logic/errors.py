"""
Errors raised by the TicTacToe engine.

Both errors mean the caller broke the engine's contract
(e.g. dispatching a move after the game ended). They are
never retried.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for engine errors."""


class InvalidMove(TicTacToeError, ValueError):
    """A move was out of range, on an occupied cell, out of turn, or after the game ended."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class NoLegalMove(TicTacToeError, RuntimeError):
    """The computer was asked to move on a board with nothing left to play."""
