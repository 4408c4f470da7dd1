"""Logging and progress reporting for long-running searches."""

from .logging import configure_logging
from .progress import NullProgress, RichSearchProgress, SearchProgress

__all__ = ["NullProgress", "RichSearchProgress", "SearchProgress", "configure_logging"]
