"""Listing functions for download roots and release folders."""

from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

from mediasort.exceptions import FilesystemError

# Sort key given to children that are not regular files
NOT_A_FILE_SIZE = -1


def list_entries(directory: Path) -> List[Path]:
    """
    List the immediate children of a directory, in filesystem order.

    The listing is fully materialized so callers can mutate the
    directory while walking the result.

    Args:
        directory: Directory to list.

    Returns:
        List of child paths.

    Raises:
        FilesystemError: If the directory cannot be read.
    """
    try:
        return list(directory.iterdir())
    except OSError as e:
        raise FilesystemError("list", directory, e) from e


def file_size(path: Path) -> int:
    """
    Return the size of a regular file, or NOT_A_FILE_SIZE for anything else.

    Raises:
        FilesystemError: If the path cannot be stat'ed.
    """
    try:
        if not path.is_file():
            return NOT_A_FILE_SIZE
        return path.stat().st_size
    except OSError as e:
        raise FilesystemError("stat", path, e) from e


def list_children_by_size(directory: Path) -> List[Path]:
    """
    List the children of a release folder, largest first.

    Only the top level is inspected. Non-file children sort last and
    ties keep their listing order.

    Args:
        directory: Release folder.

    Returns:
        Child paths sorted by descending size.
    """
    children = list_entries(directory)
    sizes = {child: file_size(child) for child in children}
    ordered = sorted(children, key=lambda child: sizes[child], reverse=True)
    logger.debug(f"{len(ordered)} children in {directory.name}")
    return ordered


def split_extension(filename: str) -> Optional[str]:
    """
    Extract the extension of a file name.

    Args:
        filename: Bare file name.

    Returns:
        Text after the last dot, or None when the name has no dot.

    Examples:
        >>> split_extension("Show.S01E02.mkv")
        'mkv'
        >>> split_extension("README") is None
        True
    """
    parts = filename.split('.')
    if len(parts) < 2:
        return None
    return parts[-1]


def find_extension(extension: str, extensions: Iterable[str]) -> Optional[str]:
    """
    Return the configured spelling of an extension, ignoring case.

    Examples:
        >>> find_extension("MKV", ["avi", "mkv"])
        'mkv'
    """
    lowered = extension.lower()
    for candidate in extensions:
        if candidate.lower() == lowered:
            return candidate
    return None


def matches_extension(extension: str, extensions: Iterable[str]) -> bool:
    """Check an extension against a list, ignoring case."""
    return find_extension(extension, extensions) is not None


def is_empty_directory(directory: Path) -> bool:
    """
    Check whether a directory exists and has no children.

    Raises:
        FilesystemError: If the directory cannot be read.
    """
    if not directory.is_dir():
        return False
    return not list_entries(directory)
