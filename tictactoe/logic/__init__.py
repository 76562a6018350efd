"""
Logic module for TicTacToe.
Handles board state, rules, and AI opponent.
"""

from .player import Player
from .errors import TicTacToeError, InvalidMove, NoLegalMove
from .win_checker import WINNING_LINES, GameStatus, Outcome, WinChecker
from .move_validator import MoveValidator, ValidationResult
from .board import Board, place_mark
from .ai_player import AIPlayer, Difficulty, choose_move
from .scoreboard import Scoreboard
from .session import GameMode, GameSession
