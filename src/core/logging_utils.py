"""Logging helpers for GitFx.

Only simple configuration based on a verbosity count; records go to
stderr so they never mix with the interactive output.
"""

from __future__ import annotations

import logging


def resolve_level(verbosity: int, level: str | None = None) -> int:
    """
    Translate a verbosity count into a logging level.

    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG

    An explicit level name wins over the count.
    """

    if level:
        return logging.getLevelName(level.upper())
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int, level: str | None = None) -> None:
    """Configure the root logger once per process."""

    logging.basicConfig(
        level=resolve_level(verbosity, level),
        format="%(levelname)s %(name)s: %(message)s",
    )
