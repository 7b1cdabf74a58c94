"""Logging configuration for the API process."""

from __future__ import annotations

import logging
import sys

_CONFIGURED = False


def setup_logging(level: str | int = "INFO") -> None:
    """
    Configure the root logger with a single stream handler.

    Safe to call more than once; only the level is updated on later calls.
    """
    global _CONFIGURED

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    if _CONFIGURED:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

    # SQL echo is controlled by settings.DEBUG on the engine itself
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _CONFIGURED = True
