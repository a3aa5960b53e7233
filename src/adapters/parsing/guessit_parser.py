"""
Implementation du parser de fichiers video.

Ce module fournit GuessitVideoParser qui implemente IVideoParser pour
extraire les attributs d'un fichier video a partir de son chemin :
nom nettoye, annee, type de bonus, format 3D et type de stub.
"""

from pathlib import PurePath
from typing import Any, Optional

from guessit import guessit
from guessit.api import GuessitException
from loguru import logger

from src.adapters.parsing.extra_rules import detect_extra_type
from src.adapters.parsing.format_3d import detect_format_3d
from src.core.entities.video import VideoCandidate
from src.core.ports.parser import INoiseCleaner, IVideoParser
from src.core.value_objects.naming_options import NamingOptions


class GuessitVideoParser(IVideoParser):
    """
    Parser de fichiers video.

    L'annee et le titre sont extraits par les expressions de date de
    NamingOptions ; guessit n'est consulte que pour retrouver une annee
    que ces expressions n'ont pas reconnue.
    """

    def __init__(self, noise_cleaner: INoiseCleaner) -> None:
        """
        Initialise le parser.

        Args:
            noise_cleaner: Implementation de INoiseCleaner
        """
        self._noise_cleaner = noise_cleaner

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
            parse_name: True pour extraire annee et titre nettoye

        Returns:
            VideoCandidate, ou None si le fichier n'a pas une extension video ou stub.
        """
        if not path:
            return None

        pure = PurePath(path)
        is_stub = False
        stub_type: Optional[str] = None
        container: Optional[str] = None

        if not is_directory:
            extension = pure.suffix
            if not options.is_video_extension(extension):
                if not options.is_stub_extension(extension):
                    return None
                is_stub = True
                stub_type = self._resolve_stub_type(pure, options)
            container = extension.lstrip(".").lower()

        is_3d, format_3d = detect_format_3d(
            path,
            options.format_3d_precondition,
            options.format_3d_tokens,
            options.format_3d_delimiters,
        )

        name = pure.stem
        year: Optional[int] = None
        if parse_name:
            name, year = self._clean_date_time(name, options)
            if year is None:
                year = self._guess_year(pure.name)
            cleaned = self._noise_cleaner.clean(name, options.clean_string_patterns)
            if cleaned is not None:
                name = cleaned.strip()

        return VideoCandidate(
            path=path,
            is_directory=is_directory,
            name=name,
            year=year,
            extra_type=detect_extra_type(path, options.extra_rules),
            container=container,
            is_3d=is_3d,
            format_3d=format_3d,
            is_stub=is_stub,
            stub_type=stub_type,
        )

    def _clean_date_time(
        self, name: str, options: NamingOptions
    ) -> tuple[str, Optional[int]]:
        """
        Separe le titre et l'annee d'un nom ("Film (2010)" -> ("Film", 2010)).

        Args:
            name: Nom sans extension
            options: Conventions de nommage

        Returns:
            (titre, annee), ou (name, None) si aucune annee n'est reconnue.
        """
        if not name:
            return name, None

        for pattern in options.clean_date_time_patterns:
            match = pattern.search(name)
            if match is None:
                continue
            title, year = match.group("title"), match.group("year")
            if title and year and year.isdigit():
                return title.rstrip(), int(year)

        return name, None

    def _guess_year(self, file_name: str) -> Optional[int]:
        """
        Demande l'annee a guessit.

        Args:
            file_name: Nom du fichier avec son extension

        Returns:
            Annee reconnue par guessit, ou None.
        """
        try:
            result: dict[str, Any] = guessit(file_name, {"type": "movie"})
        except GuessitException as e:
            logger.debug(f"guessit a echoue sur {file_name}: {e}")
            return None

        year = result.get("year")
        if isinstance(year, list):
            year = year[0] if year else None
        return year if isinstance(year, int) else None

    def _resolve_stub_type(self, pure: PurePath, options: NamingOptions) -> Optional[str]:
        """Type de support d'un stub, lu dans le jeton precedant l'extension ("Film.dvd.disc")."""
        token = PurePath(pure.stem).suffix.lstrip(".").lower()
        for stub_token, stub_type in options.stub_types:
            if token == stub_token:
                return stub_type
        return None
