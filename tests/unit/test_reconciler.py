"""Tests unitaires pour le module reconciler."""

import pytest
from pathlib import Path
from unittest.mock import patch

from mediasort.config.context import execution_context
from mediasort.exceptions import FilesystemError
from mediasort.models.media import MediaKind, SortTarget
from mediasort.parsing.name_parser import TvEpisodeParser, MovieParser
from mediasort.pipeline.reconciler import (
    DirectoryReconciler,
    ReconcileStats,
    reconcile,
    reconcile_target,
)

MB = 1024 * 1024


def _tv_reconciler(downloads: Path, library: Path, **kwargs) -> DirectoryReconciler:
    return DirectoryReconciler(downloads, library, TvEpisodeParser(), **kwargs)


class TestReconcileStats:
    """Tests pour la classe ReconcileStats."""

    def test_initialisation_defaut(self):
        """Initialise avec des compteurs à zéro."""
        stats = ReconcileStats()
        assert stats.entries == 0
        assert stats.moved == 0
        assert stats.deleted_files == 0
        assert stats.removed_directories == 0
        assert stats.parse_failures == 0
        assert stats.errors == 0

    def test_summary(self):
        """Le résumé contient les comptages."""
        stats = ReconcileStats(entries=3, moved=2)
        assert "3 entries" in stats.summary()
        assert "2 moved" in stats.summary()


class TestTvRelease:
    """Traitement d'une release de série."""

    def test_moves_episode_and_cleans_release(self, download_layout, make_release):
        """La vidéo est renommée, le nfo et le répertoire disparaissent."""
        downloads, library = download_layout
        release = make_release(downloads, "Show.Name.S01E02.720p.WEB", {
            "Show.Name.S01E02.mkv": 10 * MB,
            "release.nfo": 1024,
        })

        stats = _tv_reconciler(downloads, library).reconcile()

        expected = library / "Show Name" / "Season 01" / "Show Name S01E02.mkv"
        assert expected.is_file()
        assert expected.stat().st_size == 10 * MB
        assert not release.exists()
        assert stats.moved == 1
        assert stats.removed_directories == 1

    def test_uses_directory_name_not_file_name(self, download_layout, make_release):
        """Le nom cible vient du répertoire de release."""
        downloads, library = download_layout
        make_release(downloads, "Other.Show.S03E04.1080p", {"abc123.mkv": 100})

        _tv_reconciler(downloads, library).reconcile()

        assert (library / "Other Show" / "Season 03" / "Other Show S03E04.mkv").is_file()

    def test_uses_configured_extension_spelling(self, download_layout, make_release):
        """L'extension cible est celle de la configuration."""
        downloads, library = download_layout
        make_release(downloads, "Show.S01E01", {"episode.MKV": 100})

        _tv_reconciler(downloads, library).reconcile()

        season = library / "Show" / "Season 01"
        assert [p.name for p in season.iterdir()] == ["Show S01E01.mkv"]

    def test_empty_series_name_stays_in_library(self, download_layout, make_release):
        """Un nom de série vide reste sous la racine de la vidéothèque."""
        downloads, library = download_layout
        release = make_release(downloads, "..S01E01.720p", {"ep.mkv": 100})

        stats = _tv_reconciler(downloads, library).reconcile()

        moved = library / "Season 01" / " S01E01.mkv"
        assert moved.is_file()
        assert moved.resolve().is_relative_to(library.resolve())
        assert not release.exists()
        assert stats.moved == 1

    def test_existing_destination_directory(self, download_layout, make_release):
        """Un répertoire de saison existant est réutilisé."""
        downloads, library = download_layout
        season = library / "Show" / "Season 01"
        season.mkdir(parents=True)
        (season / "Show S01E01.mkv").touch()
        make_release(downloads, "Show.S01E02", {"ep.mkv": 100})

        _tv_reconciler(downloads, library).reconcile()

        assert sorted(p.name for p in season.iterdir()) == ["Show S01E01.mkv", "Show S01E02.mkv"]


class TestSidecarOnlyRelease:
    """Release sans vidéo."""

    def test_deletes_ignorable_files_and_directory(self, download_layout, make_release):
        """Les fichiers annexes et le répertoire sont supprimés."""
        downloads, library = download_layout
        release = make_release(downloads, "Show.S01E02", {"x.nfo": 10, "y.srr": 20})

        stats = _tv_reconciler(downloads, library).reconcile()

        assert not release.exists()
        assert list(library.iterdir()) == []
        assert stats.deleted_files == 2
        assert stats.removed_directories == 1

    def test_keeps_unknown_files(self, download_layout, make_release):
        """Les fichiers inconnus restent, le répertoire aussi."""
        downloads, library = download_layout
        release = make_release(downloads, "Show.S01E02", {"x.nfo": 10, "readme.txt": 20})

        _tv_reconciler(downloads, library).reconcile()

        assert release.exists()
        assert [p.name for p in release.iterdir()] == ["readme.txt"]

    def test_ignore_extension_case_insensitive(self, download_layout, make_release):
        """Les extensions à supprimer ignorent la casse."""
        downloads, library = download_layout
        release = make_release(downloads, "junk", {"release.NFO": 10})

        _tv_reconciler(downloads, library).reconcile()

        assert not release.exists()

    def test_files_without_extension_are_skipped(self, download_layout, make_release):
        """Un fichier sans point n'est ni vidéo ni annexe."""
        downloads, library = download_layout
        release = make_release(downloads, "Show.S01E02", {"nfo": 10})

        _tv_reconciler(downloads, library).reconcile()

        assert (release / "nfo").exists()


class TestMultipleVideos:
    """Release contenant plusieurs vidéos."""

    def test_largest_video_wins_and_second_is_lost(self, download_layout, make_release):
        """Seule la plus grande vidéo est déplacée, l'autre est supprimée avec le répertoire."""
        downloads, library = download_layout
        release = make_release(downloads, "Show.S01E02", {
            "main.mkv": 5000,
            "sample.mkv": 100,
        })

        stats = _tv_reconciler(downloads, library).reconcile()

        moved = library / "Show" / "Season 01" / "Show S01E02.mkv"
        assert moved.stat().st_size == 5000
        assert list(moved.parent.iterdir()) == [moved]
        assert not release.exists()
        assert stats.moved == 1

    def test_non_video_largest_file(self, download_layout, make_release):
        """Une vidéo plus petite qu'un fichier non vidéo est quand même trouvée."""
        downloads, library = download_layout
        release = make_release(downloads, "Movie.Name.2020.1080p", {
            "archive.rar": 9000,
            "movie.mp4": 3000,
        })

        DirectoryReconciler(downloads, library, MovieParser()).reconcile()

        assert (library / "Movie Name 2020.mp4").stat().st_size == 3000
        assert not release.exists()


class TestParseFailure:
    """Nom de release non reconnu."""

    def test_video_left_in_place(self, download_layout, make_release):
        """La vidéo reste, les annexes sont supprimées."""
        downloads, library = download_layout
        release = make_release(downloads, "Random.Folder", {
            "video.mkv": 500,
            "release.nfo": 10,
        })

        stats = _tv_reconciler(downloads, library).reconcile()

        assert (release / "video.mkv").exists()
        assert not (release / "release.nfo").exists()
        assert list(library.iterdir()) == []
        assert stats.parse_failures == 1
        assert stats.moved == 0

    def test_scan_continues_after_failure(self, download_layout, make_release):
        """Les autres releases sont traitées."""
        downloads, library = download_layout
        make_release(downloads, "Random.Folder", {"video.mkv": 500})
        make_release(downloads, "Show.S02E05", {"video.mkv": 500})

        stats = _tv_reconciler(downloads, library).reconcile()

        assert (library / "Show" / "Season 02" / "Show S02E05.mkv").exists()
        assert stats.entries == 2


class TestTopLevelEntries:
    """Entrées de premier niveau."""

    def test_loose_files_untouched(self, download_layout):
        """Les fichiers isolés à la racine ne sont pas traités."""
        downloads, library = download_layout
        loose = downloads / "Show.S01E02.mkv"
        loose.write_bytes(b"x" * 100)
        nfo = downloads / "loose.nfo"
        nfo.touch()

        stats = _tv_reconciler(downloads, library).reconcile()

        assert loose.exists()
        assert nfo.exists()
        assert list(library.iterdir()) == []
        assert stats.entries == 2

    def test_nested_directories_not_visited(self, download_layout, make_release):
        """Les sous-répertoires d'une release ne sont pas parcourus."""
        downloads, library = download_layout
        release = make_release(downloads, "Random", {})
        (release / "Sample").mkdir()
        (release / "Sample" / "sample.mkv").touch()
        (release / "Sample" / "junk.nfo").touch()

        _tv_reconciler(downloads, library).reconcile()

        assert (release / "Sample" / "junk.nfo").exists()

    def test_empty_release_directory_removed(self, download_layout):
        """Un répertoire de release vide est supprimé."""
        downloads, library = download_layout
        (downloads / "empty").mkdir()

        _tv_reconciler(downloads, library).reconcile()

        assert not (downloads / "empty").exists()

    def test_missing_download_root(self, tmp_path):
        """Un répertoire de téléchargements absent est journalisé sans lever."""
        stats = _tv_reconciler(tmp_path / "missing", tmp_path / "library").reconcile()

        assert stats.errors == 1
        assert stats.entries == 0


class TestErrorIsolation:
    """Isolation des erreurs par entrée."""

    def test_move_error_skips_entry(self, download_layout, make_release):
        """Une erreur de déplacement n'interrompt pas le passage."""
        downloads, library = download_layout
        make_release(downloads, "Show.S01E01", {"a.mkv": 100})
        make_release(downloads, "Show.S01E02", {"b.mkv": 100})

        calls = []

        def failing_move(source, destination, dry_run=None):
            calls.append(source)
            if len(calls) == 1:
                raise FilesystemError("move", source, PermissionError("denied"))
            source.rename(destination)
            return destination

        with patch("mediasort.pipeline.reconciler.move_file", side_effect=failing_move):
            stats = _tv_reconciler(downloads, library).reconcile()

        assert stats.errors == 1
        assert stats.moved == 1
        assert len(calls) == 2

    def test_stat_error_skips_entry(self, download_layout, make_release):
        """Une erreur OSError brute est aussi isolée."""
        downloads, library = download_layout
        make_release(downloads, "Show.S01E01", {"a.mkv": 100})

        with patch(
            "mediasort.pipeline.reconciler.list_children_by_size",
            side_effect=PermissionError("denied"),
        ):
            stats = _tv_reconciler(downloads, library).reconcile()

        assert stats.errors == 1


class TestDryRun:
    """Mode simulation."""

    def test_nothing_changes(self, download_layout, make_release):
        """Aucun fichier n'est déplacé ni supprimé."""
        downloads, library = download_layout
        release = make_release(downloads, "Show.S01E02", {"a.mkv": 100, "b.nfo": 10})

        stats = _tv_reconciler(downloads, library, dry_run=True).reconcile()

        assert (release / "a.mkv").exists()
        assert (release / "b.nfo").exists()
        assert list(library.iterdir()) == []
        assert stats.moved == 1

    def test_context_dry_run(self, download_layout, make_release):
        """Le contexte d'exécution active la simulation."""
        downloads, library = download_layout
        release = make_release(downloads, "Show.S01E02", {"a.mkv": 100})

        with execution_context(dry_run=True):
            _tv_reconciler(downloads, library).reconcile()

        assert (release / "a.mkv").exists()


class TestReconcileFunctions:
    """Tests des fonctions reconcile et reconcile_target."""

    def test_reconcile_with_custom_extensions(self, download_layout, make_release):
        """Les listes d'extensions sont configurables."""
        downloads, library = download_layout
        release = make_release(downloads, "Show.S01E02", {"a.webm": 100, "b.txt": 10})

        reconcile(downloads, library, TvEpisodeParser(), ["webm"], ["txt"])

        assert (library / "Show" / "Season 01" / "Show S01E02.webm").exists()
        assert not release.exists()

    def test_reconcile_target(self, download_layout, make_release):
        """Utilise la configuration d'un SortTarget."""
        downloads, library = download_layout
        make_release(downloads, "Movie.Name.2021.1080p.BluRay", {"m.mp4": 100})
        target = SortTarget(
            kind=MediaKind.MOVIE,
            download_root=downloads,
            destination_root=library,
            parser=MovieParser(),
        )

        stats = reconcile_target(target)

        assert (library / "Movie Name 2021.mp4").exists()
        assert stats.moved == 1
