"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- naming/ : Empilement, nettoyage des noms, detection disques et photos
- parsing/ : Parsing des chemins video et des noms d'episodes (guessit)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""

from src.adapters.file_system import FileSystemAdapter
from src.adapters.naming import (
    DiscDetector,
    ExtensionPhotoDetector,
    RegexNoiseCleaner,
    RegexStackResolver,
)
from src.adapters.parsing import GuessitEpisodeParser, GuessitVideoParser

__all__ = [
    "DiscDetector",
    "ExtensionPhotoDetector",
    "FileSystemAdapter",
    "GuessitEpisodeParser",
    "GuessitVideoParser",
    "RegexNoiseCleaner",
    "RegexStackResolver",
]
