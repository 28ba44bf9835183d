"""Command-line interface argument parsing."""

import argparse
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

from mediasort.config.settings import (
    VIDEO_EXTENSIONS,
    IGNORE_EXTENSIONS,
    DEFAULT_TV_DOWNLOAD_DIR,
    DEFAULT_MOVIE_DOWNLOAD_DIR,
    DEFAULT_TV_LIBRARY_DIR,
    DEFAULT_MOVIE_LIBRARY_DIR,
    MIN_RUN_INTERVAL_SECONDS,
    POLL_INTERVAL_SECONDS,
    ENV_TV_DOWNLOADS,
    ENV_MOVIE_DOWNLOADS,
    ENV_TV_LIBRARY,
    ENV_MOVIE_LIBRARY,
    ENV_INTERVAL,
    ENV_POLL,
)
from mediasort.models.media import MediaKind, SortTarget
from mediasort.parsing.name_parser import get_parser


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        tv_download_dir: Completed TV downloads.
        movie_download_dir: Completed movie downloads.
        tv_library_dir: TV library root.
        movie_library_dir: Movie library root.
        min_interval: Minimum seconds between two sort passes.
        poll_interval: Seconds between two scheduler ticks.
        video_extensions: Extensions moved into the library.
        ignore_extensions: Extensions deleted unconditionally.
        run_once: If True, run a single pass and exit.
        dry_run: If True, simulate without making changes.
        debug: If True, enable debug logging.
        log_file: Optional rotating log file.
    """

    tv_download_dir: Path = DEFAULT_TV_DOWNLOAD_DIR
    movie_download_dir: Path = DEFAULT_MOVIE_DOWNLOAD_DIR
    tv_library_dir: Path = DEFAULT_TV_LIBRARY_DIR
    movie_library_dir: Path = DEFAULT_MOVIE_LIBRARY_DIR
    min_interval: float = MIN_RUN_INTERVAL_SECONDS
    poll_interval: float = POLL_INTERVAL_SECONDS
    video_extensions: Tuple[str, ...] = field(default=VIDEO_EXTENSIONS)
    ignore_extensions: Tuple[str, ...] = field(default=IGNORE_EXTENSIONS)
    run_once: bool = False
    dry_run: bool = False
    debug: bool = False
    log_file: Optional[Path] = None


def _env_default(name: str, fallback) -> str:
    """Read a default from the environment, falling back to a constant."""
    return os.getenv(name) or str(fallback)


def split_extensions(value: str) -> Tuple[str, ...]:
    """
    Split a comma-separated extension list.

    Examples:
        >>> split_extensions("mkv, .AVI,,mp4")
        ('mkv', 'AVI', 'mp4')
    """
    return tuple(
        part.strip().lstrip('.')
        for part in value.split(',')
        if part.strip().lstrip('.')
    )


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Path and interval defaults can be overridden through MEDIASORT_*
    environment variables.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='mediasort',
        description="""
        Watches completed download folders and moves TV episodes and movies
        into the media library with standardized names.
        """
    )

    # Directory arguments
    parser.add_argument(
        '--tv-downloads',
        default=_env_default(ENV_TV_DOWNLOADS, DEFAULT_TV_DOWNLOAD_DIR),
        help=f"completed TV downloads (default: {DEFAULT_TV_DOWNLOAD_DIR})"
    )

    parser.add_argument(
        '--movie-downloads',
        default=_env_default(ENV_MOVIE_DOWNLOADS, DEFAULT_MOVIE_DOWNLOAD_DIR),
        help=f"completed movie downloads (default: {DEFAULT_MOVIE_DOWNLOAD_DIR})"
    )

    parser.add_argument(
        '--tv-library',
        default=_env_default(ENV_TV_LIBRARY, DEFAULT_TV_LIBRARY_DIR),
        help=f"TV library root (default: {DEFAULT_TV_LIBRARY_DIR})"
    )

    parser.add_argument(
        '--movie-library',
        default=_env_default(ENV_MOVIE_LIBRARY, DEFAULT_MOVIE_LIBRARY_DIR),
        help=f"movie library root (default: {DEFAULT_MOVIE_LIBRARY_DIR})"
    )

    # Scheduling
    parser.add_argument(
        '--interval',
        type=float,
        default=_env_default(ENV_INTERVAL, MIN_RUN_INTERVAL_SECONDS),
        help=f"minimum seconds between two sort passes (default: {MIN_RUN_INTERVAL_SECONDS:g})"
    )

    parser.add_argument(
        '--poll',
        type=float,
        default=_env_default(ENV_POLL, POLL_INTERVAL_SECONDS),
        help=f"seconds between two scheduler ticks (default: {POLL_INTERVAL_SECONDS:g})"
    )

    # Extensions
    parser.add_argument(
        '--video-ext',
        type=split_extensions,
        default=VIDEO_EXTENSIONS,
        help=f"comma-separated video extensions (default: {','.join(VIDEO_EXTENSIONS)})"
    )

    parser.add_argument(
        '--ignore-ext',
        type=split_extensions,
        default=IGNORE_EXTENSIONS,
        help=f"comma-separated extensions to delete (default: {','.join(IGNORE_EXTENSIONS)})"
    )

    # Mode flags
    parser.add_argument(
        '--once',
        action='store_true',
        help="run a single sort pass and exit"
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="simulation mode - no file modifications"
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )

    parser.add_argument(
        '--log-file',
        default=None,
        help="also write logs to this rotating file"
    )

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    return CLIArgs(
        tv_download_dir=Path(namespace.tv_downloads),
        movie_download_dir=Path(namespace.movie_downloads),
        tv_library_dir=Path(namespace.tv_library),
        movie_library_dir=Path(namespace.movie_library),
        min_interval=namespace.interval,
        poll_interval=namespace.poll,
        video_extensions=tuple(namespace.video_ext),
        ignore_extensions=tuple(namespace.ignore_ext),
        run_once=namespace.once,
        dry_run=namespace.dry_run,
        debug=namespace.debug,
        log_file=Path(namespace.log_file) if namespace.log_file else None,
    )


def validate_directories(
    download_dirs: List[Path],
    library_dirs: List[Path],
    dry_run: bool = False
) -> bool:
    """
    Validate download roots and create missing library roots.

    Args:
        download_dirs: Download roots (must exist).
        library_dirs: Library roots.
        dry_run: If True, skip directory creation.

    Returns:
        True if validation passed, False otherwise.
    """
    for download_dir in download_dirs:
        if not download_dir.is_dir():
            logger.error(f"Download directory {download_dir} does not exist")
            return False

    if not dry_run:
        for library_dir in library_dirs:
            library_dir.mkdir(parents=True, exist_ok=True)

    return True


def build_targets(cli_args: CLIArgs) -> List[SortTarget]:
    """
    Build the TV and movie sort configurations.

    Args:
        cli_args: Parsed CLI arguments.

    Returns:
        One SortTarget per media kind, TV first.
    """
    return [
        SortTarget(
            kind=MediaKind.TV,
            download_root=cli_args.tv_download_dir,
            destination_root=cli_args.tv_library_dir,
            parser=get_parser(MediaKind.TV),
            video_extensions=cli_args.video_extensions,
            ignore_extensions=cli_args.ignore_extensions,
        ),
        SortTarget(
            kind=MediaKind.MOVIE,
            download_root=cli_args.movie_download_dir,
            destination_root=cli_args.movie_library_dir,
            parser=get_parser(MediaKind.MOVIE),
            video_extensions=cli_args.video_extensions,
            ignore_extensions=cli_args.ignore_extensions,
        ),
    ]
