"""
Interfaces ports pour le parsing et le nettoyage des noms de fichiers.

Interfaces abstraites (ports) definissant les contrats pour extraire les
attributs d'un fichier video, reconnaitre un nom d'episode et retirer les
jetons de bruit d'un nom.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Optional

from src.core.entities.video import VideoCandidate
from src.core.value_objects.naming_options import NamingOptions
from src.core.value_objects.parsed_info import EpisodeName


class IVideoParser(ABC):
    """
    Interface pour l'extraction des attributs d'un fichier video.

    Produit un VideoCandidate (nom, annee, type de bonus, 3D, stub) a partir
    d'un chemin, sans acceder au contenu du fichier.
    """

    @abstractmethod
    def parse_video_file(
        self,
        path: str,
        is_directory: bool,
        options: NamingOptions,
        parse_name: bool = True,
    ) -> Optional[VideoCandidate]:
        """
        Analyse un chemin et construit le candidat video correspondant.

        Args:
            path: Chemin complet du fichier ou du repertoire
            is_directory: True si le chemin designe un repertoire
            options: Conventions de nommage
            parse_name: True pour nettoyer le nom (annee, jetons de qualite),
                        False pour garder le nom de fichier tel quel

        Retourne:
            VideoCandidate, ou None si le chemin ne ressemble pas a une video.
        """
        ...


class IEpisodeParser(ABC):
    """
    Interface pour la reconnaissance des noms d'episodes.

    L'implementation utilisera typiquement la bibliotheque guessit.
    """

    @abstractmethod
    def parse_episode(
        self, path: str, options: NamingOptions, strict: bool = False
    ) -> Optional[EpisodeName]:
        """
        Teste si un chemin suit une convention de nommage d'episode.

        Args:
            path: Chemin complet du fichier
            options: Conventions de nommage
            strict: True pour exiger un numero de saison

        Retourne:
            EpisodeName si le chemin ressemble a un episode, sinon None.
        """
        ...


class INoiseCleaner(ABC):
    """Interface pour le retrait des jetons de bruit (qualite, source, release)."""

    @abstractmethod
    def clean(self, text: str, patterns: Sequence[re.Pattern[str]]) -> Optional[str]:
        """
        Retire les jetons de bruit reconnus d'un texte.

        Args:
            text: Texte a nettoyer
            patterns: Expressions definissant un groupe nomme "cleaned"

        Retourne:
            Le texte nettoye, ou None si aucun jeton n'a ete reconnu.
        """
        ...
