"""
Configuration for the TicTacToe game.
Defaults for mode, difficulty, timing, storage, and logging.

Every setting can be overridden with an environment variable, e.g.:
    TTT_DIFFICULTY=hard TTT_MODE=ai tictactoe
"""

import os
from pathlib import Path


def _env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is not None and value.strip() != "":
        return value.strip()
    return default


class GameConfig:
    """
    Configuration class for game settings.
    Change these values (or set the environment variables) to suit your setup!
    """

    # ==================== GAME SETTINGS ====================
    DEFAULT_MODE = _env("TTT_MODE", "pvp")              # "pvp" or "ai"
    DEFAULT_DIFFICULTY = _env("TTT_DIFFICULTY", "easy")  # "easy", "medium" or "hard"

    # ==================== COMPUTER OPPONENT ====================
    # Pause before the computer moves, so it looks like it's thinking
    THINKING_DELAY_SEC = float(_env("TTT_THINKING_DELAY", "0.5"))

    # Chance that a Medium move is random instead of optimal
    MEDIUM_RANDOM_CHANCE = float(_env("TTT_MEDIUM_RANDOM_CHANCE", "0.5"))

    # ==================== STORAGE ====================
    SCORES_PATH = Path(_env("TTT_SCORES_PATH", str(Path.home() / ".tictactoe_scores.json")))

    # ==================== LOGGING ====================
    # WARNING keeps log lines from interleaving with the board
    LOG_LEVEL = _env("LOG_LEVEL", "WARNING").upper()
    LOG_FILE = _env("LOG_FILE", "")  # empty: console only
    LOG_MAX_MB = int(_env("LOG_MAX_MB", "10"))
    LOG_BACKUP_COUNT = int(_env("LOG_BACKUP_COUNT", "5"))
