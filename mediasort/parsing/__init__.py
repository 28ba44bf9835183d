"""Release name parsing."""

from mediasort.parsing.name_parser import (
    NameParser,
    TvEpisodeParser,
    MovieParser,
    clean_title,
    format_season_folder,
    get_parser,
)

__all__ = [
    "NameParser",
    "TvEpisodeParser",
    "MovieParser",
    "clean_title",
    "format_season_folder",
    "get_parser",
]
