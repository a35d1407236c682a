"""Logging setup for the dictionary engine and its CLI."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "wordgift"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str, None], default: int = logging.WARNING) -> int:
    """Map a level name such as ``"debug"`` or a numeric level to an int.

    Unknown names fall back to ``default``.
    """

    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(
    level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None
) -> None:
    """Send ``wordgift`` records to ``stream`` (stderr by default).

    Only the package logger is touched, so an embedding application keeps
    its own root configuration. Calling again replaces the handler.
    """

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level, default=logging.INFO))
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``wordgift`` namespace."""

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging(logging.WARNING)
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
