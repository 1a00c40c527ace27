"""
Logging setup.

Provides consistent logging across the engine and the GUI shell. Records go to
stdout, which doubles as the notification channel for save results and notices.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: str | None = None) -> None:
    """
    Configure root logging to stdout.

    Parameters
    ----------
    level:
        Logging level name (DEBUG, INFO, WARNING, ERROR). Unknown names fall
        back to INFO.
    format_string:
        Custom format string. If None, DEFAULT_FORMAT is used.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get the logger for a module.

    Parameters
    ----------
    name:
        Logger name (typically __name__).

    Returns
    -------
    logging.Logger
        Logger instance.
    """
    return logging.getLogger(name)
