"""Logging setup for the clifx command line.

Animation frames own stdout, so log records always go to stderr.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from clifx.limits import DEBUG_BUILD

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

_logging_initialized: bool = False


def resolve_log_level(level: str | None = None) -> str:
    """Pick the effective level: explicit value, CLIFX_LOG_LEVEL, debug build, WARNING."""
    if level:
        return level.upper()
    env_level = os.environ.get("CLIFX_LOG_LEVEL", "").upper()
    if env_level in LOG_LEVELS:
        return env_level
    return "DEBUG" if DEBUG_BUILD else "WARNING"


def setup_logging(level: str | None = None) -> None:
    """Attach a stderr handler to the ``clifx`` logger.

    This is idempotent - calling it again only adjusts the level.
    """
    global _logging_initialized

    logger = logging.getLogger("clifx")
    logger.setLevel(resolve_log_level(level))

    if _logging_initialized:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    _logging_initialized = True
    logger.debug("Logging initialized at %s", logging.getLevelName(logger.level))
