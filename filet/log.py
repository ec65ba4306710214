"""Logging setup.

The TUI owns the terminal, so log records go to a file under the platform
user-log directory and never to stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import APP_NAME, default_log_path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.WARNING, log_path: Path | None = None) -> logging.Logger:
    """Attach a file handler to the ``filet`` logger and return it.

    Falls back to a ``NullHandler`` when the log file cannot be opened.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    target = log_path if log_path is not None else default_log_path()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(target, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["LOG_FORMAT", "configure_logging"]
