"""Logging setup shared by the library and the command line."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the ``docnav`` hierarchy."""
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure root logging for command-line runs.

    Args:
        level: Level name (e.g. ``"INFO"``) or numeric logging level.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logging.basicConfig(level=level, format=_LOG_FORMAT, force=True)
