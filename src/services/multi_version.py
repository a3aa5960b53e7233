"""
Service de detection des versions multiples d'un meme contenu.

Deux fichiers differents d'un meme dossier peuvent representer le meme film
dans des qualites ou sources differentes :

    Alpha/Alpha - 1080p.mkv
    Alpha/Alpha - 720p.mkv

Le classifieur decide quelles unites sont eligibles a la fusion, les regroupe
sous un nom canonique ("Alpha") et range les autres fichiers comme versions
alternatives de la premiere unite du groupe.
"""

import re

from loguru import logger

from src.core.entities.video import VideoUnit
from src.core.ports.parser import IEpisodeParser, INoiseCleaner
from src.core.value_objects.naming_options import NamingOptions
from src.utils.naming import (
    equals_ignore_case,
    file_stem,
    ordinal_sort_key,
    parent_folder_name,
    same_year,
    starts_with_ignore_case,
    strip_version_suffix,
)

# Un reste de nom qui commence par un jeton entre crochets : "[Director's Cut]"
_BRACKETED_TOKEN = re.compile(r"^\[([^]]*)\]")


class MultiVersionClassifier:
    """
    Classifieur des versions alternatives.

    Coordonne:
    - Le parser d'episodes (IEpisodeParser) pour les noms de type episode
    - Le nettoyeur de jetons (INoiseCleaner) pour ignorer qualite et source
    """

    def __init__(
        self,
        episode_parser: IEpisodeParser,
        noise_cleaner: INoiseCleaner,
    ) -> None:
        """
        Initialise le classifieur.

        Args:
            episode_parser: Implementation de IEpisodeParser
            noise_cleaner: Implementation de INoiseCleaner
        """
        self._episode_parser = episode_parser
        self._noise_cleaner = noise_cleaner

    def group_by_version(
        self, videos: list[VideoUnit], options: NamingOptions
    ) -> list[VideoUnit]:
        """
        Fusionne les unites d'un meme dossier qui sont des versions d'un meme contenu.

        Les unites fusionnees gardent leur premier membre ; les fichiers
        principaux des autres membres deviennent ses versions alternatives
        et il est renomme avec le nom canonique du groupe.

        Args:
            videos: Unites situees dans un meme dossier
            options: Conventions de nommage

        Returns:
            La liste fusionnee triee par nom (ordre ordinal), ou la liste
            d'entree inchangee si la fusion n'est pas envisageable.
        """
        if not videos:
            return videos

        folder_name = parent_folder_name(videos[0].primary.path)
        candidates = [video for video in videos if video.extra_type is None]

        if len(folder_name) <= 1 or not same_year(candidates):
            return videos

        mergeable: list[VideoUnit] = []
        not_mergeable: list[VideoUnit] = []
        for video in videos:
            if video.extra_type is None and self.is_eligible(
                folder_name, video.primary.path, options
            ):
                mergeable.append(video)
            else:
                not_mergeable.append(video)

        # dict conserve l'ordre de premiere apparition des groupes
        groups: dict[str, list[VideoUnit]] = {}
        for video in mergeable:
            groups.setdefault(strip_version_suffix(video.name), []).append(video)

        merged: list[VideoUnit] = []
        for key, members in groups.items():
            survivor = members[0]
            merged.append(survivor)
            if len(members) < 2:
                continue

            survivor.alternate_versions = [member.primary for member in members[1:]]
            survivor.name = key
            logger.debug(
                f"Versions multiples regroupees sous '{key}': "
                f"{len(survivor.alternate_versions)} version(s) alternative(s)"
            )

        merged.extend(not_mergeable)
        merged.sort(key=lambda video: ordinal_sort_key(video.name))
        return merged

    def is_eligible(
        self, folder_name: str, test_file_path: str, options: NamingOptions
    ) -> bool:
        """
        Determine si un fichier peut etre une version alternative du contenu du dossier.

        Un nom d'episode est eligible sauf si son nom sans suffixe de version
        repete a la fois le nom de la serie et celui du dossier. Sinon le nom
        doit etre le nom du dossier suivi d'un qualificatif court : rien apres
        nettoyage, un tiret, ou un jeton entre crochets.

        Args:
            folder_name: Nom du dossier contenant le fichier
            test_file_path: Chemin complet du fichier principal de l'unite
            options: Conventions de nommage

        Returns:
            True si le fichier est eligible a la fusion.
        """
        if not folder_name:
            return False

        test_name = file_stem(test_file_path)

        episode = self._episode_parser.parse_episode(test_file_path, options, strict=False)
        if episode is not None:
            grouper = strip_version_suffix(test_name)
            return not (
                equals_ignore_case(grouper, episode.series_name)
                and equals_ignore_case(grouper, folder_name)
            )

        if not starts_with_ignore_case(test_name, folder_name):
            return False

        # Le nom du dossier n'est pas nettoye : seul le reste compte
        remainder = test_name[len(folder_name):].strip()

        cleaned = remainder
        cleaned_name = self._noise_cleaner.clean(remainder, options.clean_string_patterns)
        if cleaned_name is not None:
            cleaned = cleaned_name.strip()

        return (
            not cleaned
            or remainder.startswith("-")
            or _BRACKETED_TOKEN.match(cleaned) is not None
        )
