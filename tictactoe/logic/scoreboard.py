"""
Win/loss/draw tallies for TicTacToe.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .player import Player
from .win_checker import GameStatus, Outcome

logger = logging.getLogger(__name__)


@dataclass
class Scoreboard:
    """
    Running totals across games.

    In a game against the computer a computer win counts as ai_wins.
    Every other win (including both players in pvp) counts as player_wins.
    """
    player_wins: int = 0
    ai_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome, computer_player: Optional[Player] = None):
        """
        Add a finished game to the totals.

        Args:
            outcome: The final outcome. IN_PROGRESS is ignored.
            computer_player: The computer's side, or None without a computer.
        """
        if outcome.status == GameStatus.DRAW:
            self.draws += 1
        elif outcome.status == GameStatus.WIN:
            if computer_player is not None and outcome.winner == computer_player:
                self.ai_wins += 1
            else:
                self.player_wins += 1

    def reset(self):
        """Zero all totals."""
        self.player_wins = 0
        self.ai_wins = 0
        self.draws = 0

    def to_dict(self) -> dict:
        return {
            "playerWins": self.player_wins,
            "aiWins": self.ai_wins,
            "draws": self.draws,
        }

    def save(self, path: Union[str, Path]):
        """Write the totals as JSON."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Scoreboard":
        """
        Read totals written by save().

        A missing file gives zeros. So does an unreadable one,
        with a warning logged.
        """
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return cls(
                player_wins=int(data.get("playerWins", 0)),
                ai_wins=int(data.get("aiWins", 0)),
                draws=int(data.get("draws", 0)),
            )
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Could not read scores from %s: %s", path, e)
            return cls()
