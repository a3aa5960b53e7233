"""
Service de regroupement des fichiers video en unites logiques.

Transforme une liste plate de candidats video (fichiers et repertoires d'un
meme dossier) en unites : parties empilees (CD1/CD2), fichiers isoles,
versions alternatives fusionnees, puis bonus rattaches tels quels.
"""

from collections.abc import Sequence
from typing import Optional

from loguru import logger

from src.core.entities.video import VideoCandidate, VideoUnit
from src.core.ports.parser import IVideoParser
from src.core.ports.stacking import IStackResolver
from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.naming_options import NamingOptions
from src.core.value_objects.stack import StackedGroup
from src.services.multi_version import MultiVersionClassifier


class VideoGroupingService:
    """
    Service orchestrant le regroupement des candidats video.

    Coordonne:
    - Le resolveur de piles (IStackResolver) pour les contenus multi-parties
    - Le parser video (IVideoParser) pour re-analyser chaque partie d'une pile
    - Le classifieur multi-version (MultiVersionClassifier)

    Ordre de sortie : unites issues des piles (ordre de decouverte), puis
    fichiers isoles (tries par nom si la fusion multi-version a eu lieu),
    puis bonus (ordre d'entree).
    """

    def __init__(
        self,
        stack_resolver: IStackResolver,
        video_parser: IVideoParser,
        classifier: MultiVersionClassifier,
    ) -> None:
        """
        Initialise le service de regroupement.

        Args:
            stack_resolver: Implementation de IStackResolver
            video_parser: Implementation de IVideoParser
            classifier: Classifieur des versions alternatives
        """
        self._stack_resolver = stack_resolver
        self._video_parser = video_parser
        self._classifier = classifier

    def group_videos(
        self,
        candidates: Sequence[VideoCandidate],
        options: NamingOptions,
        support_multi_version: bool = True,
        parse_name: bool = True,
    ) -> list[VideoUnit]:
        """
        Regroupe des candidats video en unites logiques.

        Les bonus sont ecartes de l'empilement : un bonus portant le meme
        motif de nom qu'un film decoupe serait sinon absorbe dans sa pile.

        Args:
            candidates: Candidats video d'un meme dossier
            options: Conventions de nommage
            support_multi_version: True pour fusionner les versions alternatives
            parse_name: True pour nettoyer les noms des parties empilees

        Returns:
            Les unites video, chaque fichier d'entree apparaissant une seule fois.
        """
        non_extras = [
            FileSystemEntry.from_path(candidate.path, candidate.is_directory)
            for candidate in candidates
            if not candidate.is_extra
        ]
        stacks = self._stack_resolver.resolve_stacks(non_extras, options)

        standalone: list[VideoCandidate] = []
        remaining_extras: list[VideoCandidate] = []
        for candidate in candidates:
            if any(stack.contains(candidate.path, candidate.is_directory) for stack in stacks):
                continue
            if not candidate.is_extra:
                standalone.append(candidate)
            else:
                remaining_extras.append(candidate)

        videos: list[VideoUnit] = []
        for stack in stacks:
            unit = self._build_stack_unit(stack, options, parse_name)
            if unit is not None:
                videos.append(unit)

        for candidate in standalone:
            videos.append(
                VideoUnit(name=candidate.name, files=[candidate], year=candidate.year)
            )

        if support_multi_version:
            videos = self._classifier.group_by_version(videos, options)

        # Les bonus restants sont ajoutes apres la fusion : jamais fusionnes
        videos.extend(
            VideoUnit(
                name=extra.name,
                files=[extra],
                year=extra.year,
                extra_type=extra.extra_type,
            )
            for extra in remaining_extras
        )

        return videos

    def _build_stack_unit(
        self, stack: StackedGroup, options: NamingOptions, parse_name: bool
    ) -> Optional[VideoUnit]:
        """
        Construit l'unite d'une pile en re-analysant chacune de ses parties.

        Args:
            stack: Pile retournee par le resolveur
            options: Conventions de nommage
            parse_name: True pour nettoyer les noms des parties

        Returns:
            L'unite de la pile, ou None si aucune partie n'est une video.
        """
        files: list[VideoCandidate] = []
        for path in stack.files:
            parsed = self._video_parser.parse_video_file(
                path, stack.is_directory_stack, options, parse_name
            )
            if parsed is not None:
                files.append(parsed)

        if not files:
            logger.debug(f"Pile ignoree, aucune partie video: {stack.name}")
            return None

        logger.debug(f"Pile '{stack.name}': {len(files)} partie(s)")
        return VideoUnit(name=stack.name, files=files, year=files[0].year)
