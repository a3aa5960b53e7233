"""
Objet valeur decrivant une entree du systeme de fichiers.

Le coeur ne lit jamais le disque : l'hote lui transmet les enfants d'un
repertoire sous forme de FileSystemEntry (chemin, nom, repertoire ou non).
"""

from dataclasses import dataclass
from pathlib import PurePath


@dataclass(frozen=True)
class FileSystemEntry:
    """
    Entree (fichier ou repertoire) d'un repertoire.

    Attributs:
        path: Chemin complet de l'entree
        name: Nom de l'entree (dernier segment du chemin, avec extension)
        is_directory: True si l'entree est un repertoire
    """

    path: str
    name: str = ""
    is_directory: bool = False

    @classmethod
    def from_path(cls, path: str, is_directory: bool = False) -> "FileSystemEntry":
        """Construit une entree en deduisant le nom depuis le chemin."""
        return cls(path=path, name=PurePath(path).name if path else "", is_directory=is_directory)
