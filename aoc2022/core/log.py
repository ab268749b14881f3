"""
Logging setup (loguru).
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = ("<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                  "<level>{level: <8}</level> | "
                  "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                  "<level>{message}</level>")
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", log_dir: Optional[str] = None):
    """
    Route loguru output to stderr, and to a daily log file when log_dir is given.

    Args:
        level: minimum level for every sink
        log_dir: directory for aoc2022_<date>.log files
    """
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "aoc2022_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="7 days",
            level=level,
            encoding="utf-8",
            format=FILE_FORMAT,
        )

    return logger
