"""Composition root: wires the in-memory inventory and logging together.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

import logging
import sys

import structlog

from ims.domain.model.ids import IdSequence
from ims.domain.model.inventory import Inventory

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL = "WARNING"


def _stderr_logger(*args) -> structlog.PrintLogger:
    # Resolve sys.stderr per call so redirected streams are honoured.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send structured log lines to stderr, keeping stdout for the menu."""
    name = level.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {', '.join(LOG_LEVELS)}")
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, name)),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def inventory(first_id: int = 1) -> Inventory:
    return Inventory(ids=IdSequence(first_id))
