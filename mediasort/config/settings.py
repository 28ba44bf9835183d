"""Configuration settings and constants for the mediasort package."""

from pathlib import Path
from typing import Tuple

# Video file extensions moved into the library
VIDEO_EXTENSIONS: Tuple[str, ...] = ("mkv", "avi", "mp4", "m4v")

# Sidecar file extensions deleted unconditionally
IGNORE_EXTENSIONS: Tuple[str, ...] = ("nzb", "nfo", "srr")

# Default directories
DEFAULT_TV_DOWNLOAD_DIR = Path('/mnt/media/downloads/completed/Series')
DEFAULT_MOVIE_DOWNLOAD_DIR = Path('/mnt/media/downloads/completed/Movies')
DEFAULT_TV_LIBRARY_DIR = Path('/mnt/media/tv')
DEFAULT_MOVIE_LIBRARY_DIR = Path('/mnt/media/movies')

# Minimum delay between the start of two sort passes (5 minutes)
MIN_RUN_INTERVAL_SECONDS: float = 300.0

# Delay between two scheduler ticks
POLL_INTERVAL_SECONDS: float = 30.0

# Environment variables overriding the defaults (also read from .env)
ENV_TV_DOWNLOADS = "MEDIASORT_TV_DOWNLOADS"
ENV_MOVIE_DOWNLOADS = "MEDIASORT_MOVIE_DOWNLOADS"
ENV_TV_LIBRARY = "MEDIASORT_TV_LIBRARY"
ENV_MOVIE_LIBRARY = "MEDIASORT_MOVIE_LIBRARY"
ENV_INTERVAL = "MEDIASORT_INTERVAL"
ENV_POLL = "MEDIASORT_POLL"

# Log file rotation
LOG_ROTATION = "10 MB"
LOG_RETENTION = "7 days"
