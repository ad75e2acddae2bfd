"""Centralized logging configuration for shopcart.

Every module logs through ``logging.getLogger(__name__)``; this module
attaches handlers to the ``shopcart`` logger once, at startup.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "shopcart"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_initialized = False


def setup_logging(level: str = "WARNING", log_file: str | Path | None = None) -> logging.Logger:
    """Configure the ``shopcart`` logger.

    Log lines go to stderr so they never interleave with the session's
    own output on stdout.  Calling this again is a no-op unless
    ``reset_logging()`` ran in between.
    """
    global _initialized

    root_logger = logging.getLogger(LOGGER_NAME)
    if _initialized:
        return root_logger

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _initialized = True
    return root_logger


def reset_logging() -> None:
    """Detach all handlers so ``setup_logging`` can run again."""
    global _initialized

    root_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    _initialized = False
