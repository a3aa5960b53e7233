"""
Detection des structures de disque DVD et Blu-ray.

Un DVD est reconnu par un dossier VIDEO_TS contenant au moins un fichier
.vob, ou par la presence d'un fichier VIDEO_TS.IFO. Un Blu-ray est reconnu
par un dossier BDMV.
"""

from pathlib import PurePath

from src.core.ports.file_system import IDirectoryLister, IDiscDetector
from src.core.value_objects.naming_options import NamingOptions
from src.utils.naming import equals_ignore_case


class DiscDetector(IDiscDetector):
    """
    Detecteur de structures de disque.

    Le test DVD sur un repertoire liste son contenu via IDirectoryLister ;
    les autres tests ne portent que sur les noms.
    """

    def __init__(self, directory_lister: IDirectoryLister) -> None:
        """
        Initialise le detecteur.

        Args:
            directory_lister: Implementation de IDirectoryLister
        """
        self._directory_lister = directory_lister

    def is_dvd_directory(self, path: str, name: str, options: NamingOptions) -> bool:
        if not equals_ignore_case(name, options.dvd_directory_name):
            return False

        return any(
            not entry.is_directory
            and PurePath(entry.path).suffix.lower() == options.dvd_content_extension
            for entry in self._directory_lister.list_entries(path)
        )

    def is_bluray_directory(self, name: str, options: NamingOptions) -> bool:
        return equals_ignore_case(name, options.bluray_directory_name)

    def is_dvd_file(self, name: str, options: NamingOptions) -> bool:
        return equals_ignore_case(name, options.dvd_file_name)
