"""
Game session for TicTacToe.
Owns the board, whose turn it is, the mode, and the difficulty.
"""

import logging
import random
from enum import Enum
from typing import Optional, Union

from .ai_player import AIPlayer, Difficulty
from .board import Board
from .errors import InvalidMove, NoLegalMove
from .player import Player
from .scoreboard import Scoreboard
from .win_checker import GameStatus, Outcome

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Who plays against whom."""
    PVP = "pvp"  # human vs human
    AI = "ai"    # human vs computer


class GameSession:
    """
    A running TicTacToe game.

    Game flow against the computer:
    1. Human calls play() with a cell
    2. If the game goes on, is_computer_turn becomes True
    3. Caller (after any "thinking" delay) calls computer_move()
    4. Repeat until someone wins or it's a draw
    5. restart() for a new game; the scoreboard keeps counting
    """

    def __init__(
        self,
        mode: Union[GameMode, str] = GameMode.PVP,
        difficulty: Union[Difficulty, str] = Difficulty.EASY,
        computer_player: Player = Player.O,
        scoreboard: Optional[Scoreboard] = None,
        rng: Optional[random.Random] = None,
        medium_random_chance: Optional[float] = None
    ):
        """
        Start a new game.

        Args:
            mode: PVP or AI.
            difficulty: Computer strength, used in AI mode.
            computer_player: Which player the computer controls in AI mode.
            scoreboard: Totals to update when a game ends.
            rng: Random source for the computer's moves.
            medium_random_chance: Override for the MEDIUM coin flip.
        """
        self.mode = GameMode(mode)
        self.computer_player = computer_player
        self.scoreboard = scoreboard if scoreboard is not None else Scoreboard()
        self.board = Board()

        self.ai = AIPlayer(difficulty, player=computer_player, rng=rng)
        if medium_random_chance is not None:
            self.ai.medium_random_chance = medium_random_chance

        self.outcome = Outcome.in_progress()

    @property
    def difficulty(self) -> Difficulty:
        return self.ai.difficulty

    @property
    def current_player(self) -> Player:
        return self.board.next_player()

    @property
    def is_active(self) -> bool:
        return not self.outcome.is_over

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.mode == GameMode.AI
            and self.is_active
            and self.current_player == self.computer_player
        )

    def play(self, index: int) -> Outcome:
        """
        Play a human move for the current player.

        Args:
            index: Cell index (0-8).

        Returns:
            The outcome after the move.

        Raises:
            InvalidMove: Bad cell, game over, or it's the computer's turn.
        """
        if self.is_computer_turn:
            raise InvalidMove("It's the computer's turn!", index)

        self.board.apply_move(index, self.current_player)
        return self._after_move()

    def computer_move(self) -> int:
        """
        Let the computer play its move.

        Returns:
            The index the computer played.

        Raises:
            NoLegalMove: Not the computer's turn, or the game is over.
        """
        if not self.is_computer_turn:
            raise NoLegalMove("The computer has no move to play right now")

        index = self.ai.choose_move(self.board)
        self.board.apply_move(index, self.computer_player)
        self._after_move()
        return index

    def restart(self):
        """Clear the board for a new game. X moves first."""
        self.board.reset()
        self.outcome = Outcome.in_progress()

    def set_mode(self, mode: Union[GameMode, str]):
        """Switch mode. Starts a new game."""
        self.mode = GameMode(mode)
        self.restart()

    def set_difficulty(self, difficulty: Union[Difficulty, str]):
        """Switch computer strength. Starts a new game."""
        self.ai.difficulty = Difficulty(difficulty)
        self.restart()

    def status_text(self) -> str:
        """One-line description of the game state."""
        if self.outcome.status == GameStatus.WIN:
            if self._computer_won():
                return "Computer Wins!"
            return f"Player {self.outcome.winner.value} Wins!"
        if self.outcome.status == GameStatus.DRAW:
            return "It's a Draw!"
        if self.is_computer_turn:
            return "Computer's Turn"
        return f"Player {self.current_player.value}'s Turn"

    def _computer_won(self) -> bool:
        return self.mode == GameMode.AI and self.outcome.winner == self.computer_player

    def _after_move(self) -> Outcome:
        self.outcome = self.board.evaluate()

        if self.outcome.is_over:
            computer = self.computer_player if self.mode == GameMode.AI else None
            self.scoreboard.record(self.outcome, computer)
            logger.info("Game over (%s): %s", self.mode.value, self.status_text())

        return self.outcome
