"""Logging helpers for the sales dashboard."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", format_string: Optional[str] = None) -> None:
    """Configure the root logger to write to stdout.

    Unknown level names fall back to INFO.
    """
    resolved_level = getattr(logging, str(level).upper(), None)
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO

    logging.basicConfig(
        level=resolved_level,
        format=format_string or LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger().setLevel(resolved_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger, configuring logging with defaults when nothing is set up yet."""
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
