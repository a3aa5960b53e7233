"""
Interfaces ports pour l'observation du systeme de fichiers.

Le coeur ne lit jamais le disque lui-meme : la detection des structures de
disque, des photos et le listage d'un sous-dossier passent par ces ports.
"""

from abc import ABC, abstractmethod

from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.naming_options import NamingOptions


class IDirectoryLister(ABC):
    """Interface de listage des enfants directs d'un repertoire."""

    @abstractmethod
    def list_entries(self, directory: str) -> list[FileSystemEntry]:
        """
        Liste les enfants directs d'un repertoire.

        Retourne:
            Les entrees triees par chemin, ou une liste vide si le repertoire
            est illisible ou absent.
        """
        ...


class IDiscDetector(ABC):
    """
    Interface de reconnaissance des structures de disque.

    Definit les predicats DVD (dossier VIDEO_TS, fichier VIDEO_TS.IFO)
    et Blu-ray (dossier BDMV). Les noms des signatures sont lus dans les
    NamingOptions recues a chaque appel.
    """

    @abstractmethod
    def is_dvd_directory(self, path: str, name: str, options: NamingOptions) -> bool:
        """Verifie si un repertoire est un dossier VIDEO_TS de DVD."""
        ...

    @abstractmethod
    def is_bluray_directory(self, name: str, options: NamingOptions) -> bool:
        """Verifie si un nom de repertoire est un dossier BDMV de Blu-ray."""
        ...

    @abstractmethod
    def is_dvd_file(self, name: str, options: NamingOptions) -> bool:
        """Verifie si un nom de fichier est la signature d'un DVD."""
        ...


class IPhotoDetector(ABC):
    """
    Interface de reconnaissance des photos d'accompagnement.

    Consultee uniquement quand la bibliotheque accepte les photos.
    """

    @abstractmethod
    def is_image_file(self, path: str, options: NamingOptions) -> bool:
        """Verifie si un fichier est une photo (extensions et noms d'illustration de options)."""
        ...

    @abstractmethod
    def is_owned_by_media(self, video_path: str, photo_name: str) -> bool:
        """Verifie si une photo appartient a la video donnee (meme prefixe de nom)."""
        ...
