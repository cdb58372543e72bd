"""
Logging configuration for navstack.

Call :func:`configure_logging` once at startup, before the app runs.
"""

import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None, console: bool = False) -> None:
    """
    Replace loguru's default sink with the configured ones.

    Args:
        level: Minimum level for every sink
        log_file: Path of a rotating log file; None or empty disables it
        console: Also log to stderr (clashes with the TUI, off by default)
    """
    level = level.upper()
    logger.remove()

    if log_file:
        logger.add(
            sink=log_file,
            level=level,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention="7 days",
        )

    if console:
        logger.add(sink=sys.stderr, level=level, colorize=True)

    logger.debug(f"Logging configured: level={level}, log_file={log_file or None}, console={console}")
