"""File operations for moving and deleting release files."""

import shutil
from pathlib import Path
from typing import Optional

from loguru import logger

from mediasort.config.context import get_context
from mediasort.exceptions import FilesystemError
from mediasort.filesystem.discovery import is_empty_directory


def _simulating(dry_run: Optional[bool]) -> bool:
    """Resolve an explicit dry_run flag against the active context."""
    if dry_run is None:
        return get_context().dry_run
    return dry_run


def ensure_directory(directory: Path, dry_run: Optional[bool] = None) -> None:
    """
    Create a directory and all its missing parents.

    Args:
        directory: Directory to create.
        dry_run: If True, only simulate. None uses the execution context.

    Raises:
        FilesystemError: If the directory cannot be created.
    """
    if directory.is_dir():
        return

    if _simulating(dry_run):
        logger.info(f'SIMULATION - Create directory: {directory}')
        return

    try:
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug(f'Directory created: {directory}')
    except OSError as e:
        raise FilesystemError("mkdir", directory, e) from e


def move_file(source: Path, destination: Path, dry_run: Optional[bool] = None) -> Path:
    """
    Move a file to its destination, replacing any file already there.

    The destination folder must exist. On the same filesystem this is
    an atomic rename.

    Args:
        source: Source file path.
        destination: Destination file path.
        dry_run: If True, only simulate. None uses the execution context.

    Returns:
        The destination path.

    Raises:
        FilesystemError: If the move fails.
    """
    if _simulating(dry_run):
        logger.info(f'SIMULATION - Move: {source.name} -> {destination}')
        return destination

    try:
        shutil.move(str(source), str(destination))
    except OSError as e:
        raise FilesystemError("move", source, e) from e

    logger.debug(f'File moved: {destination}')
    return destination


def delete_file(path: Path, dry_run: Optional[bool] = None) -> None:
    """
    Delete a single file.

    Raises:
        FilesystemError: If the file cannot be removed.
    """
    if _simulating(dry_run):
        logger.info(f'SIMULATION - Delete file: {path}')
        return

    try:
        path.unlink()
        logger.debug(f'File deleted: {path}')
    except OSError as e:
        raise FilesystemError("delete", path, e) from e


def delete_tree(directory: Path, dry_run: Optional[bool] = None) -> None:
    """
    Delete a directory and everything it contains.

    Raises:
        FilesystemError: If the tree cannot be removed.
    """
    if _simulating(dry_run):
        logger.info(f'SIMULATION - Delete directory: {directory}')
        return

    try:
        shutil.rmtree(directory)
    except OSError as e:
        raise FilesystemError("rmtree", directory, e) from e


def remove_if_empty(directory: Path, dry_run: Optional[bool] = None) -> bool:
    """
    Remove a directory if it still exists and has no children.

    Args:
        directory: Directory to check.
        dry_run: If True, only simulate. None uses the execution context.

    Returns:
        True if the directory was (or would be) removed.

    Raises:
        FilesystemError: If the directory cannot be read or removed.
    """
    if not is_empty_directory(directory):
        return False

    logger.info(f'Deleting empty directory {directory}')
    if _simulating(dry_run):
        logger.info(f'SIMULATION - Delete directory: {directory}')
        return True

    try:
        directory.rmdir()
    except OSError as e:
        raise FilesystemError("rmdir", directory, e) from e
    return True
