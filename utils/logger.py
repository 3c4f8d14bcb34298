"""
utils/logger.py
---------------
Logging setup shared by the store, the pool and the tests.
Call `get_logger(__name__)`; the root logger is configured on first use
at the level named by LOG_LEVEL in the environment.
"""

import logging
import sys

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def resolve_level(name: str) -> int:
    """
    Map a LOG_LEVEL value to a logging level.

    Accepts level names in any case ("debug", "WARNING") or a number
    ("10"). Anything unrecognised falls back to INFO.
    """
    value = name.strip().upper()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else logging.INFO


def _init_logging() -> None:
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(resolve_level(LOG_LEVEL))
    root.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """Return the named logger, configuring the stdout handler once."""
    _init_logging()
    return logging.getLogger(name)
