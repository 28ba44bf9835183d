"""Data models describing media kinds and parse results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple

from mediasort.config.settings import VIDEO_EXTENSIONS, IGNORE_EXTENSIONS

if TYPE_CHECKING:
    from mediasort.parsing.name_parser import NameParser


class MediaKind(Enum):
    """Kind of media handled by a download root."""

    TV = "tv"
    MOVIE = "movie"

    @property
    def label(self) -> str:
        """Human readable name used in logs and reports."""
        return "TV" if self is MediaKind.TV else "Movies"


@dataclass(frozen=True)
class ParsedTarget:
    """
    Library location computed from a release folder name.

    Attributes:
        target_base_name: File name without extension, e.g. "Show S01E02".
        target_subdirectory: Relative folder under the library root, or None
            to place the file directly in the root.
    """

    target_base_name: str
    target_subdirectory: Optional[str] = None

    def target_directory(self, destination_root: Path) -> Path:
        """Return the folder the renamed file goes into."""
        if self.target_subdirectory is None:
            return destination_root
        # Empty segments are dropped so the result stays under the root
        parts = [part for part in self.target_subdirectory.split("/") if part]
        return destination_root.joinpath(*parts)

    def destination_for(self, destination_root: Path, extension: str) -> Path:
        """
        Build the full destination path for a video file.

        Args:
            destination_root: Library root for this media kind.
            extension: File extension without the leading dot.

        Returns:
            destination_root/[target_subdirectory/]target_base_name.extension
        """
        return self.target_directory(destination_root) / f"{self.target_base_name}.{extension}"


@dataclass
class SortTarget:
    """
    Fixed configuration bound to one media kind.

    Attributes:
        kind: Media kind handled.
        download_root: Directory scanned for completed releases.
        destination_root: Library root receiving renamed files.
        parser: Name parser applied to release folder names.
        video_extensions: Extensions moved into the library.
        ignore_extensions: Extensions deleted unconditionally.
    """

    kind: MediaKind
    download_root: Path
    destination_root: Path
    parser: "NameParser"
    video_extensions: Tuple[str, ...] = field(default=VIDEO_EXTENSIONS)
    ignore_extensions: Tuple[str, ...] = field(default=IGNORE_EXTENSIONS)
