"""
Console front-end for TicTacToe.

This script ties together:
- Logic (board, win checking, AI opponent, session)
- Scoreboard persistence
- Logging and configuration

Run this script to play TicTacToe in a terminal!
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Optional

from .config import GameConfig
from .logging_setup import setup_logging
from .logic import Difficulty, GameMode, GameSession, InvalidMove, Player, Scoreboard

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Plays TicTacToe on stdin/stdout.

    Game flow:
    1. The board is printed with empty cells numbered 1-9
    2. The human types a cell number ('r' restarts, 'q' quits)
    3. Against the computer, it "thinks" briefly and then moves
    4. Repeat until someone wins or it's a draw
    5. Scores are shown and saved, and a new game can start
    """

    def __init__(
        self,
        session: GameSession,
        scores_path: Optional[Path] = None,
        thinking_delay: float = GameConfig.THINKING_DELAY_SEC,
        input_fn: Optional[Callable[[str], str]] = None,
        sleep_fn: Callable[[float], None] = time.sleep
    ):
        """
        Set up the console game.

        Args:
            session: The game session to drive.
            scores_path: Where to save the scoreboard. None disables saving.
            thinking_delay: Seconds to wait before each computer move.
            input_fn: Reads a line of input. Defaults to input().
            sleep_fn: Used for the thinking delay.
        """
        self.session = session
        self.scores_path = scores_path
        self.thinking_delay = thinking_delay
        self._input = input_fn or input
        self._sleep = sleep_fn
        self.is_running = False

    def start(self):
        """Play games until the human quits."""
        print("\n" + "=" * 40)
        print("   TicTacToe")
        if self.session.mode == GameMode.AI:
            print(f"   Against the computer ({self.session.difficulty.value})")
        else:
            print("   Two players")
        print("=" * 40)

        self.is_running = True
        while self.is_running:
            self._game_loop()
            if not self.is_running:
                break

            self._show_game_result()
            if not self._ask_play_again():
                break
            self.session.restart()

        self.is_running = False

    def _game_loop(self):
        """Play one game to the end (or until quit)."""
        while self.is_running and self.session.is_active:
            print()
            print(self.session.board.render())
            print(f"\n{self.session.status_text()}")

            if self.session.is_computer_turn:
                self._computer_move()
            else:
                self._human_move()

    def _human_move(self):
        """Read and play one human move."""
        text = self._read(f"Player {self.session.current_player.value}, choose a cell (1-9), 'r' restart, 'q' quit: ")
        if text is None or text == "q":
            print("\nGame quit.")
            self.is_running = False
            return

        if text == "r":
            self._reset_game()
            return

        try:
            cell = int(text)
        except ValueError:
            print("Please enter a number from 1 to 9.")
            return

        try:
            self.session.play(cell - 1)
        except InvalidMove as e:
            print(f"Invalid move: {e}")

    def _computer_move(self):
        """Let the computer move, after a short pause."""
        print("Computer is thinking...")
        if self.thinking_delay > 0:
            self._sleep(self.thinking_delay)

        index = self.session.computer_move()
        print(f"Computer plays {index + 1}")

    def _show_game_result(self):
        """Show the final board, result, and totals."""
        print()
        print(self.session.board.render())
        print("\n" + "=" * 40)
        print(f"   {self.session.status_text()}")
        print("=" * 40)

        scores = self.session.scoreboard
        print(f"Player wins: {scores.player_wins}  Computer wins: {scores.ai_wins}  Draws: {scores.draws}")

        self._save_scores()

    def _save_scores(self):
        if self.scores_path is None:
            return
        try:
            self.session.scoreboard.save(self.scores_path)
        except OSError as e:
            logger.warning("Could not save scores to %s: %s", self.scores_path, e)

    def _ask_play_again(self) -> bool:
        text = self._read("Play again? [y/n]: ")
        return text is not None and text.startswith("y")

    def _reset_game(self):
        """Start the current game over."""
        print("\nRestarting game...")
        self.session.restart()

    def _read(self, prompt: str) -> Optional[str]:
        """Read a trimmed, lower-cased line. None at end of input."""
        try:
            return self._input(prompt).strip().lower()
        except EOFError:
            return None


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe in the terminal")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="pvp: two players, ai: play against the computer"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="Computer strength in ai mode"
    )
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer play first (as X)"
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Don't pause before computer moves"
    )
    parser.add_argument(
        "--scores",
        type=Path,
        default=GameConfig.SCORES_PATH,
        help="File to keep win/loss/draw totals in"
    )
    parser.add_argument(
        "--reset-stats",
        action="store_true",
        help="Start the totals from zero"
    )

    args = parser.parse_args(argv)

    # argparse does not check defaults, which may come from the environment
    if args.mode not in [m.value for m in GameMode]:
        parser.error(f"invalid mode {args.mode!r} (check TTT_MODE)")
    if args.difficulty not in [d.value for d in Difficulty]:
        parser.error(f"invalid difficulty {args.difficulty!r} (check TTT_DIFFICULTY)")

    setup_logging()

    if args.reset_stats:
        scoreboard = Scoreboard()
        try:
            scoreboard.save(args.scores)
        except OSError as e:
            logger.warning("Could not save scores to %s: %s", args.scores, e)
    else:
        scoreboard = Scoreboard.load(args.scores)

    computer_player = Player.X if args.computer_first else Player.O

    session = GameSession(
        mode=args.mode,
        difficulty=args.difficulty,
        computer_player=computer_player,
        scoreboard=scoreboard,
        medium_random_chance=GameConfig.MEDIUM_RANDOM_CHANCE
    )

    game = ConsoleGame(
        session,
        scores_path=args.scores,
        thinking_delay=0 if args.no_delay else GameConfig.THINKING_DELAY_SEC
    )

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
