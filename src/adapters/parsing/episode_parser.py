"""
Reconnaissance des noms d'episodes avec guessit.

Utilise par le classifieur multi-version : un fichier nomme comme un
episode ("Serie.S01E02.mkv") est traite differemment d'un film.
"""

from typing import Any, Optional

from guessit import guessit
from guessit.api import GuessitException
from loguru import logger

from src.core.ports.parser import IEpisodeParser
from src.core.value_objects.naming_options import NamingOptions
from src.core.value_objects.parsed_info import EpisodeName


class GuessitEpisodeParser(IEpisodeParser):
    """
    Parser d'episodes utilisant la bibliotheque guessit.

    Un chemin est un episode si guessit le classe comme tel et y trouve un
    numero d'episode (ou une date de diffusion).
    """

    def parse_episode(
        self, path: str, options: NamingOptions, strict: bool = False
    ) -> Optional[EpisodeName]:
        """
        Teste si un chemin suit une convention de nommage d'episode.

        Args:
            path: Chemin complet du fichier
            options: Conventions de nommage
            strict: True pour exiger un numero de saison

        Returns:
            EpisodeName, ou None si le chemin n'est pas un episode.
        """
        if not path:
            return None

        try:
            result = guessit(path)
        except GuessitException as e:
            logger.debug(f"guessit a echoue sur {path}: {e}")
            return None

        if result.get("type") != "episode":
            return None

        episode = _first(result.get("episode"))
        if episode is None and result.get("date") is None:
            return None

        season = _first(result.get("season"))
        if strict and season is None:
            return None

        return EpisodeName(
            series_name=str(result.get("title", "")),
            season=season,
            episode=episode,
        )


def _first(value: Any) -> Optional[int]:
    """guessit retourne une liste pour les doubles episodes."""
    if isinstance(value, list):
        return value[0] if value else None
    return value
