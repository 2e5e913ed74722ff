"""
Logging configuration for cronexpand.

Logs always go to stderr so they never mix with the expanded output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "cronexpand"

# Map string level names to logging constants
LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(level: str | int) -> int:
    """
    Parse logging level from string or int.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    return LEVEL_MAP.get(level.upper(), logging.INFO)


def setup_logging(level: str | int = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """
    Setup logging for cronexpand.

    Args:
        level: Logging level as string (DEBUG, INFO, etc.) or int
        console: Optional Rich Console to log to (default: a new stderr console)

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Replace rather than stack handlers when called more than once
    logger.handlers.clear()
    logger.setLevel(_parse_level(level))
    logger.propagate = False

    logger.addHandler(
        RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
    )
    return logger
