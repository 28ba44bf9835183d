"""Réconciliation d'un répertoire de téléchargements avec la vidéothèque."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple

from loguru import logger

from mediasort.config.settings import VIDEO_EXTENSIONS, IGNORE_EXTENSIONS
from mediasort.exceptions import FilesystemError, ParseError
from mediasort.filesystem import (
    list_entries,
    list_children_by_size,
    split_extension,
    find_extension,
    matches_extension,
    ensure_directory,
    move_file,
    delete_file,
    delete_tree,
    remove_if_empty,
)
from mediasort.models.media import SortTarget
from mediasort.parsing.name_parser import NameParser


@dataclass
class ReconcileStats:
    """Statistiques d'un passage sur un répertoire de téléchargements."""

    entries: int = 0
    moved: int = 0
    deleted_files: int = 0
    removed_directories: int = 0
    parse_failures: int = 0
    errors: int = 0

    def summary(self) -> str:
        """Résumé d'une ligne pour les logs."""
        return (
            f"{self.entries} entries, {self.moved} moved, "
            f"{self.deleted_files} files deleted, "
            f"{self.removed_directories} directories removed, "
            f"{self.parse_failures} parse failures, {self.errors} errors"
        )


class DirectoryReconciler:
    """
    Trie les releases d'un répertoire de téléchargements.

    Chaque sous-répertoire de premier niveau est une release : son premier
    fichier vidéo (par taille décroissante) est renommé d'après le nom du
    répertoire puis déplacé dans la vidéothèque, et le répertoire est
    supprimé. Les fichiers annexes (nfo, nzb...) sont supprimés et les
    répertoires vidés sont nettoyés.

    Les fichiers isolés à la racine du répertoire de téléchargements ne
    sont jamais touchés.
    """

    def __init__(
        self,
        download_root: Path,
        destination_root: Path,
        name_parser: NameParser,
        video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
        ignore_extensions: Iterable[str] = IGNORE_EXTENSIONS,
        dry_run: Optional[bool] = None,
    ):
        """
        Initialise le réconciliateur.

        Arguments :
            download_root: Répertoire des téléchargements terminés.
            destination_root: Racine de la vidéothèque pour ce type de média.
            name_parser: Analyseur appliqué au nom des répertoires de release.
            video_extensions: Extensions déplacées dans la vidéothèque.
            ignore_extensions: Extensions supprimées sans condition.
            dry_run: Mode simulation. None utilise le contexte d'exécution.
        """
        self.download_root = download_root
        self.destination_root = destination_root
        self.name_parser = name_parser
        self.video_extensions: Tuple[str, ...] = tuple(video_extensions)
        self.ignore_extensions: Tuple[str, ...] = tuple(ignore_extensions)
        self.dry_run = dry_run

    def reconcile(self) -> ReconcileStats:
        """
        Effectue un passage complet sur le répertoire de téléchargements.

        Les erreurs d'une entrée sont journalisées puis ignorées : le
        passage continue avec l'entrée suivante.

        Retourne :
            ReconcileStats avec les comptages du passage.
        """
        stats = ReconcileStats()

        try:
            entries = list_entries(self.download_root)
        except FilesystemError as e:
            logger.error(f"Cannot scan {self.download_root}: {e}")
            stats.errors += 1
            return stats

        for entry in entries:
            stats.entries += 1
            logger.info(f"Processing {entry.name}")

            try:
                self._process_entry(entry, stats)
            except (FilesystemError, OSError) as e:
                stats.errors += 1
                logger.error(f"Error processing {entry.name}: {e}")
                continue

        logger.info(f"{self.download_root}: {stats.summary()}")
        return stats

    def _process_entry(self, entry: Path, stats: ReconcileStats) -> None:
        """Traite une entrée de premier niveau."""
        if not entry.is_dir():
            logger.debug(f"Skipping loose file {entry.name}")
            return

        for child in list_children_by_size(entry):
            if not child.is_file():
                continue

            extension = split_extension(child.name)
            if extension is None:
                continue

            video_extension = find_extension(extension, self.video_extensions)
            if video_extension is not None:
                if self._relocate_video(entry, child, video_extension, stats):
                    # Le répertoire de release n'existe plus
                    return

            if matches_extension(extension, self.ignore_extensions):
                delete_file(child, self.dry_run)
                stats.deleted_files += 1

        if remove_if_empty(entry, self.dry_run):
            stats.removed_directories += 1

    def _relocate_video(
        self,
        release_dir: Path,
        video: Path,
        extension: str,
        stats: ReconcileStats,
    ) -> bool:
        """
        Déplace une vidéo dans la vidéothèque et supprime sa release.

        Le nom cible est calculé à partir du nom du répertoire, pas du
        fichier, et l'extension cible est celle de la configuration
        (`ep.MKV` devient `... S01E01.mkv`). Tout autre fichier du
        répertoire, vidéo comprise, est supprimé avec lui.

        Retourne :
            True si le répertoire de release a été consommé, False si le
            nom n'a pas pu être analysé (la vidéo reste en place).
        """
        try:
            target = self.name_parser.parse(release_dir.name)
        except ParseError as e:
            stats.parse_failures += 1
            logger.warning(f"Error parsing path {release_dir.name}: {e}")
            return False

        ensure_directory(target.target_directory(self.destination_root), self.dry_run)

        destination = target.destination_for(self.destination_root, extension)
        logger.info(f"Moving file {video} to {destination}")
        move_file(video, destination, self.dry_run)
        stats.moved += 1

        logger.info(f"Deleting directory as moved file: {release_dir}")
        delete_tree(release_dir, self.dry_run)
        stats.removed_directories += 1
        return True


def reconcile(
    download_root: Path,
    destination_root: Path,
    name_parser: NameParser,
    video_extensions: Iterable[str] = VIDEO_EXTENSIONS,
    ignore_extensions: Iterable[str] = IGNORE_EXTENSIONS,
    dry_run: Optional[bool] = None,
) -> ReconcileStats:
    """Effectue un passage sur un répertoire de téléchargements."""
    return DirectoryReconciler(
        download_root,
        destination_root,
        name_parser,
        video_extensions,
        ignore_extensions,
        dry_run,
    ).reconcile()


def reconcile_target(target: SortTarget, dry_run: Optional[bool] = None) -> ReconcileStats:
    """Effectue un passage pour une configuration de type de média."""
    return reconcile(
        target.download_root,
        target.destination_root,
        target.parser,
        target.video_extensions,
        target.ignore_extensions,
        dry_run,
    )
