"""Exceptions personnalisées pour le tri des téléchargements."""

from pathlib import Path
from typing import Optional


class SortError(Exception):
    """Classe de base pour toutes les erreurs de tri."""

    pass


class ParseError(SortError):
    """Le nom de la release ne correspond pas au format attendu."""

    def __init__(self, raw_name: str, message: Optional[str] = None):
        self.raw_name = raw_name
        super().__init__(message or f"No match found for {raw_name}")


class FilesystemError(SortError):
    """Erreur lors d'une opération sur le système de fichiers (stat, liste, déplacement, suppression)."""

    def __init__(self, operation: str, path: Path, cause: Optional[OSError] = None):
        self.operation = operation
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"{operation} failed for {path}{detail}")
