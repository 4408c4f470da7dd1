"""Console logging setup for the ``slime_finder`` logger tree."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "slime_finder"


def configure_logging(level: str = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a single rich handler to the package logger and set its level."""
    if not isinstance(logging.getLevelName(level.upper()), int):
        raise ValueError(f"unknown log level: {level!r}")
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=console or Console(stderr=True), show_path=False))
    logger.propagate = False
    return logger
