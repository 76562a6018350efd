import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import GameConfig


def setup_logging(level: str = GameConfig.LOG_LEVEL, log_file: str = GameConfig.LOG_FILE) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    root.addHandler(stream_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=GameConfig.LOG_MAX_MB * 1024 * 1024,
            backupCount=GameConfig.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)
