"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le coeur de regroupement a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports de parsing :
- IVideoParser : Attributs d'un fichier video (nom, annee, bonus, 3D)
- IEpisodeParser : Reconnaissance des noms d'episodes
- INoiseCleaner : Retrait des jetons de bruit

Port d'empilement :
- IStackResolver : Regroupement des fichiers multi-parties

Ports systeme de fichiers :
- IDirectoryLister : Listage d'un repertoire
- IDiscDetector : Structures DVD / Blu-ray
- IPhotoDetector : Photos d'accompagnement
"""

from src.core.ports.file_system import (
    IDirectoryLister,
    IDiscDetector,
    IPhotoDetector,
)
from src.core.ports.parser import (
    IEpisodeParser,
    INoiseCleaner,
    IVideoParser,
)
from src.core.ports.stacking import IStackResolver

__all__ = [
    # Parsing
    "IVideoParser",
    "IEpisodeParser",
    "INoiseCleaner",
    # Empilement
    "IStackResolver",
    # Systeme de fichiers
    "IDirectoryLister",
    "IDiscDetector",
    "IPhotoDetector",
]
