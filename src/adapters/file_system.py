"""
Adaptateur pour l'observation du systeme de fichiers.

Implementation concrete de IDirectoryLister : liste les enfants directs
d'un repertoire sous forme de FileSystemEntry. Aucune operation d'ecriture.
"""

from pathlib import Path
from typing import Union

from loguru import logger

from src.core.ports.file_system import IDirectoryLister
from src.core.value_objects.file_entry import FileSystemEntry

PathLike = Union[str, Path]


class FileSystemAdapter(IDirectoryLister):
    """
    Implementation de IDirectoryLister pour le systeme de fichiers reel.

    Fournit egalement les tests d'existence utilises par la CLI.
    """

    def exists(self, path: PathLike) -> bool:
        """Verifie si un chemin existe."""
        return Path(path).exists()

    def is_dir(self, path: PathLike) -> bool:
        """Verifie si un chemin est un repertoire."""
        return Path(path).is_dir()

    def list_entries(self, directory: PathLike) -> list[FileSystemEntry]:
        """
        Liste les enfants directs d'un repertoire (non recursif).

        Args:
            directory: Repertoire a lister

        Returns:
            Les entrees triees par chemin, ou une liste vide si le repertoire
            est absent ou illisible.
        """
        entries: list[FileSystemEntry] = []
        try:
            for path in Path(directory).iterdir():
                entries.append(
                    FileSystemEntry(
                        path=str(path),
                        name=path.name,
                        is_directory=path.is_dir(),
                    )
                )
        except OSError as e:
            logger.debug(f"Repertoire illisible {directory}: {e}")
            return []

        entries.sort(key=lambda entry: entry.path)
        return entries
