"""Logging setup for the command line.

User-facing output goes through ``print``; this only configures the
diagnostic loggers created with ``logging.getLogger(__name__)``.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LEVEL = "WARNING"


class CliLogHandler(logging.StreamHandler):
    """Stderr handler installed by configure_logging()."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def resolve_level(level: Optional[str] = None) -> int:
    """Level from the argument, then LOG_LEVEL, then WARNING."""
    name = (level or os.getenv("LOG_LEVEL") or DEFAULT_LEVEL).upper()
    return getattr(logging, name, logging.WARNING)


def remove_cli_handlers(logger: Optional[logging.Logger] = None) -> None:
    logger = logger or logging.getLogger()
    for h in logger.handlers[:]:
        if isinstance(h, CliLogHandler):
            logger.removeHandler(h)


def configure_logging(level: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.setLevel(resolve_level(level))
    # Replace only our own handler when called more than once
    remove_cli_handlers(root)
    root.addHandler(CliLogHandler())
