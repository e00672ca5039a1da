"""Logging setup for git-cc."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(log_level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """Configure the loguru logger.

    Logs go to stderr unless a file is given. While the wizard owns the
    terminal, a log file keeps messages out of the screen.

    Args:
        log_level: Minimum level to emit.
        log_file: Optional file to write logs to instead of stderr.
    """
    logger.remove()  # Remove default handler

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="1 MB",
            retention="7 days",
        )
        return

    logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=True,
    )
