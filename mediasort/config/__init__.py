"""Configuration and execution context."""

from mediasort.config.settings import (
    VIDEO_EXTENSIONS,
    IGNORE_EXTENSIONS,
    DEFAULT_TV_DOWNLOAD_DIR,
    DEFAULT_MOVIE_DOWNLOAD_DIR,
    DEFAULT_TV_LIBRARY_DIR,
    DEFAULT_MOVIE_LIBRARY_DIR,
    MIN_RUN_INTERVAL_SECONDS,
    POLL_INTERVAL_SECONDS,
)
from mediasort.config.context import (
    ExecutionContext,
    get_context,
    execution_context,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "IGNORE_EXTENSIONS",
    "DEFAULT_TV_DOWNLOAD_DIR",
    "DEFAULT_MOVIE_DOWNLOAD_DIR",
    "DEFAULT_TV_LIBRARY_DIR",
    "DEFAULT_MOVIE_LIBRARY_DIR",
    "MIN_RUN_INTERVAL_SECONDS",
    "POLL_INTERVAL_SECONDS",
    "ExecutionContext",
    "get_context",
    "execution_context",
]
