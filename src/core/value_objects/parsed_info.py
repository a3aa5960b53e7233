"""
Objets valeur pour les informations extraites des noms de fichiers.

Contient la classification des bonus (ExtraType) et le resultat du parsing
d'un nom d'episode (EpisodeName).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ExtraType(str, Enum):
    """Type de contenu bonus detecte depuis le nom ou le dossier du fichier.

    Un fichier sans type de bonus (None) est un media principal.
    """

    TRAILER = "trailer"
    THEME_SONG = "theme_song"
    THEME_VIDEO = "theme_video"
    BEHIND_THE_SCENES = "behind_the_scenes"
    DELETED_SCENE = "deleted_scene"
    INTERVIEW = "interview"
    SCENE = "scene"
    SAMPLE = "sample"
    CLIP = "clip"
    SHORT = "short"
    FEATURETTE = "featurette"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class EpisodeName:
    """
    Resultat du parsing d'un nom d'episode.

    Attributs:
        series_name: Nom de la serie extrait du chemin
        season: Numero de saison (optionnel)
        episode: Numero d'episode (optionnel pour les episodes dates)
    """

    series_name: str
    season: Optional[int] = None
    episode: Optional[int] = None
