"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from mediasort.config.context import execution_context


@pytest.fixture(autouse=True)
def reset_execution_context():
    """Every test starts without a dry-run context."""
    with execution_context():
        yield


@pytest.fixture
def sample_tv_names():
    """Sample TV release folder names."""
    return [
        "Breaking.Bad.S01E01.720p.WEB-DL.x265",
        "Game.of.Thrones.S08E06.VOSTFR.1080p.HDTV",
        "the.office.us.s02e03.hdtv",
    ]


@pytest.fixture
def sample_movie_names():
    """Sample movie release folder names."""
    return [
        "The.Matrix.1999.MULTi.1080p.BluRay.x264-GROUP",
        "Inception.2010.FRENCH.BDRip.x264",
        "Movie.Name.2021.1080p.BluRay.mp4",
    ]


@pytest.fixture
def download_layout(tmp_path):
    """Download and library roots for one media kind."""
    downloads = tmp_path / "downloads"
    library = tmp_path / "library"
    downloads.mkdir()
    library.mkdir()
    return downloads, library


@pytest.fixture
def make_release():
    """Factory creating a release folder with files of given sizes."""

    def _make(root: Path, name: str, files: dict) -> Path:
        release = root / name
        release.mkdir(parents=True)
        for filename, size in files.items():
            (release / filename).write_bytes(b"x" * size)
        return release

    return _make
