"""Release folder name parsers for TV episodes and movies."""

import re
from abc import ABC, abstractmethod
from typing import Dict

from loguru import logger

from mediasort.exceptions import ParseError
from mediasort.models.media import MediaKind, ParsedTarget

# Release groups separate words with dots
SEPARATOR = '.'


def clean_title(raw: str) -> str:
    """
    Turn the dotted prefix of a release name into a title.

    Only the dot separator is replaced; underscores, brackets and other
    punctuation are kept as-is.

    Args:
        raw: Text preceding the season/year marker.

    Returns:
        Title with dots replaced by spaces and surrounding whitespace removed.

    Examples:
        >>> clean_title("Show.Name.")
        'Show Name'
        >>> clean_title("Show_Name.[x]")
        'Show_Name [x]'
    """
    return raw.replace(SEPARATOR, ' ').strip()


def format_season_folder(season: str) -> str:
    """Format a two-digit season as folder name, e.g. "Season 01"."""
    return f"Season {season}"


class NameParser(ABC):
    """
    Maps a raw release folder name to a library location.

    Subclasses provide the pattern and build the target from the first match.
    """

    pattern: re.Pattern

    def parse(self, raw_name: str) -> ParsedTarget:
        """
        Parse a release folder name.

        Args:
            raw_name: Name of the release folder.

        Returns:
            ParsedTarget describing where the video file goes.

        Raises:
            ParseError: If the name does not contain the expected pattern.
        """
        match = self.pattern.search(raw_name)
        if match is None:
            raise ParseError(raw_name)
        return self._build_target(match)

    @abstractmethod
    def _build_target(self, match: re.Match) -> ParsedTarget:
        """Build the target from a successful match."""


class TvEpisodeParser(NameParser):
    """Parses names like ``Show.Name.S01E02.720p`` into series/season folders."""

    pattern = re.compile(r'(.+)S([0-9]{2})E([0-9]{2})', re.IGNORECASE)

    def parse(self, raw_name: str) -> ParsedTarget:
        logger.debug(f"Parsing {raw_name}")
        return super().parse(raw_name)

    def _build_target(self, match: re.Match) -> ParsedTarget:
        series_name = clean_title(match.group(1))
        season = match.group(2)
        episode = match.group(3)

        return ParsedTarget(
            target_subdirectory=f"{series_name}/{format_season_folder(season)}",
            target_base_name=f"{series_name} S{season}E{episode}",
        )


class MovieParser(NameParser):
    """Parses names like ``Movie.Name.2021.1080p`` into ``Movie Name 2021``."""

    pattern = re.compile(r'(.+)\.([0-9]{4})\.', re.IGNORECASE)

    def _build_target(self, match: re.Match) -> ParsedTarget:
        movie_name = clean_title(match.group(1))
        year = match.group(2)

        return ParsedTarget(target_base_name=f"{movie_name} {year}")


_PARSERS: Dict[MediaKind, NameParser] = {
    MediaKind.TV: TvEpisodeParser(),
    MediaKind.MOVIE: MovieParser(),
}


def get_parser(kind: MediaKind) -> NameParser:
    """Return the name parser bound to a media kind."""
    return _PARSERS[kind]
