"""
Enumerations decrivant la nature des medias resolus.

- VideoType : forme physique de la video (fichier, DVD, Blu-ray, ISO)
- IsoType : contenu d'une image ISO
- MediaKind : type d'element produit par l'assembleur
- CollectionType : type de bibliotheque fourni par l'hote
"""

from enum import Enum


class VideoType(str, Enum):
    """Forme physique d'une video."""

    VIDEO_FILE = "video_file"
    DVD = "dvd"
    BLU_RAY = "bluray"
    ISO = "iso"


class IsoType(str, Enum):
    """Contenu d'une image disque."""

    DVD = "dvd"
    BLU_RAY = "bluray"


class MediaKind(str, Enum):
    """Type d'element produit par l'assemblage d'un dossier."""

    MOVIE = "movie"
    MUSIC_VIDEO = "music_video"
    VIDEO = "video"
    EPISODE = "episode"


class CollectionType(str, Enum):
    """Type de bibliotheque (indication fournie par l'hote).

    L'absence de type (None) designe une bibliotheque mixte.
    """

    MOVIES = "movies"
    HOME_VIDEOS = "homevideos"
    MUSIC_VIDEOS = "musicvideos"
    TV_SHOWS = "tvshows"
    PHOTOS = "photos"
