"""
Detection des photos d'accompagnement dans les bibliotheques de videos personnelles.
"""

from pathlib import PurePath

from src.core.ports.file_system import IPhotoDetector
from src.core.value_objects.naming_options import NamingOptions
from src.utils.naming import file_stem, starts_with_ignore_case


class ExtensionPhotoDetector(IPhotoDetector):
    """
    Detecteur de photos base sur l'extension.

    Les images d'illustration (poster, fanart, folder...) ne sont jamais
    considerees comme des photos.
    """

    def is_image_file(self, path: str, options: NamingOptions) -> bool:
        pure = PurePath(path)
        if pure.suffix.lower() not in options.image_file_extensions:
            return False
        return pure.stem.lower() not in options.artwork_image_names

    def is_owned_by_media(self, video_path: str, photo_name: str) -> bool:
        """Une photo appartient a une video si son nom commence par celui de la video."""
        return starts_with_ignore_case(photo_name, file_stem(video_path))
