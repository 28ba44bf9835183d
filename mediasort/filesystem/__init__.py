"""Filesystem operations for download sorting."""

from mediasort.filesystem.discovery import (
    list_entries,
    file_size,
    list_children_by_size,
    split_extension,
    find_extension,
    matches_extension,
    is_empty_directory,
)
from mediasort.filesystem.file_ops import (
    ensure_directory,
    move_file,
    delete_file,
    delete_tree,
    remove_if_empty,
)

__all__ = [
    "list_entries",
    "file_size",
    "list_children_by_size",
    "split_extension",
    "find_extension",
    "matches_extension",
    "is_empty_directory",
    "ensure_directory",
    "move_file",
    "delete_file",
    "delete_tree",
    "remove_if_empty",
]
