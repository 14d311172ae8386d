"""
Logging setup for the clutch launch optimizer.

loguru configuration with colored console output and optional file logging.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_CONSOLE_FORMAT: str = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)
_FILE_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logger(
    level: str = "INFO",
    log_file: Path | None = None,
    enable_colors: bool = True,
) -> None:
    """
    Replace loguru's default handler with a console sink and optional file sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a plain-text log file
        enable_colors: Whether to color console output when attached to a TTY
    """
    logger.remove()

    colorize = enable_colors and sys.stderr.isatty()
    logger.add(sys.stderr, level=level, format=_CONSOLE_FORMAT, colorize=colorize)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level=level,
            format=_FILE_FORMAT,
            rotation="50 MB",
            encoding="utf-8",
        )
