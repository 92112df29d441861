"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


def setup_logging(level: str = "INFO", to_file: bool = False, log_dir: Path = LOG_DIR):
    """Console logging, plus a daily file under log_dir when to_file is set."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if not to_file:
        return logger

    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "reality_check_{time:YYYY-MM-DD}.log",
        format=FILE_FORMAT,
        level="DEBUG",
        rotation="00:00",
        retention="7 days",
        compression="gz",
    )
    logger.debug("Logging to {}", log_dir)
    return logger
