"""
Service d'assemblage des films a l'echelle d'un dossier.

Travaille un niveau de repertoire a la fois :
- reconnait les structures de disque (VIDEO_TS, BDMV, VIDEO_TS.IFO)
- reconnait les films repartis sur plusieurs dossiers de disque (Disc 1, Disc 2)
- ecarte les photos d'accompagnement (bibliotheques de videos personnelles)
- regroupe les fichiers restants et separe medias principaux et bonus

Toute situation ambigue ou contradictoire retourne None : l'hote peut alors
reessayer fichier par fichier.
"""

from collections.abc import Sequence
from pathlib import PurePath
from typing import Optional, Union

from loguru import logger

from src.core.entities.video import (
    DiscFolderInfo,
    FolderContext,
    MovieAssemblyResult,
    MovieItem,
    VideoCandidate,
    VideoUnit,
)
from src.core.ports.file_system import IDirectoryLister, IDiscDetector, IPhotoDetector
from src.core.ports.parser import IVideoParser
from src.core.ports.stacking import IStackResolver
from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.media_kind import CollectionType, IsoType, MediaKind, VideoType
from src.core.value_objects.naming_options import NamingOptions
from src.services.video_grouping import VideoGroupingService
from src.utils.naming import equals_ignore_case

CollectionTypeHint = Union[CollectionType, str, None]

_ISO_EXTENSIONS = (".iso", ".img")


class MovieAssemblerService:
    """
    Service resolvant le contenu d'un dossier en films.

    Coordonne:
    - Le parser video (IVideoParser) pour analyser chaque fichier
    - Le service de regroupement (VideoGroupingService)
    - Le detecteur de disques (IDiscDetector) et de photos (IPhotoDetector)
    - Le listeur de repertoires (IDirectoryLister) pour les dossiers multi-disques
    - Le resolveur de piles (IStackResolver) pour ordonner les disques
    """

    def __init__(
        self,
        video_parser: IVideoParser,
        grouping_service: VideoGroupingService,
        stack_resolver: IStackResolver,
        disc_detector: IDiscDetector,
        photo_detector: IPhotoDetector,
        directory_lister: IDirectoryLister,
    ) -> None:
        """
        Initialise le service d'assemblage.

        Args:
            video_parser: Implementation de IVideoParser
            grouping_service: Service de regroupement des candidats video
            stack_resolver: Implementation de IStackResolver
            disc_detector: Implementation de IDiscDetector
            photo_detector: Implementation de IPhotoDetector
            directory_lister: Implementation de IDirectoryLister
        """
        self._video_parser = video_parser
        self._grouping_service = grouping_service
        self._stack_resolver = stack_resolver
        self._disc_detector = disc_detector
        self._photo_detector = photo_detector
        self._directory_lister = directory_lister

    # ------------------------------------------------------------------
    # Points d'entree
    # ------------------------------------------------------------------

    def resolve_movie_folder(
        self,
        path: str,
        parent: Optional[FolderContext],
        entries: Sequence[FileSystemEntry],
        collection_type: CollectionTypeHint,
        options: NamingOptions,
        enable_photos: bool = False,
    ) -> Optional[MovieAssemblyResult]:
        """
        Resout un dossier comme un titre unique.

        Args:
            path: Chemin du dossier a resoudre
            parent: Contexte du dossier parent (None a la racine de l'hote)
            entries: Enfants directs du dossier
            collection_type: Type de bibliotheque (None pour une bibliotheque mixte)
            options: Conventions de nommage
            enable_photos: True si la bibliotheque accepte les photos

        Returns:
            Un resultat contenant exactement un element, ou None si le dossier
            n'est pas un film a ce niveau.
        """
        collection, valid = _coerce_collection_type(collection_type)
        if not valid or _is_root(parent):
            return None

        if collection == CollectionType.MUSIC_VIDEOS:
            kind, parse_name = MediaKind.MUSIC_VIDEO, False
        elif collection == CollectionType.HOME_VIDEOS:
            kind, parse_name = MediaKind.VIDEO, False
        elif collection is None:
            # Les elements sans parent sont des bonus, resolus par l'hote
            if parent is None or parent.is_series:
                return None
            kind, parse_name = MediaKind.MOVIE, True
        elif collection == CollectionType.MOVIES:
            kind, parse_name = MediaKind.MOVIE, True
        else:
            return None

        return self._find_movie(
            path, parent, entries, collection, kind, parse_name, options, enable_photos
        )

    def resolve_multiple(
        self,
        parent: Optional[FolderContext],
        entries: Sequence[FileSystemEntry],
        collection_type: CollectionTypeHint,
        options: NamingOptions,
    ) -> Optional[MovieAssemblyResult]:
        """
        Resout les fichiers d'un dossier en plusieurs elements.

        Args:
            parent: Dossier contenant les entrees
            entries: Enfants directs du dossier
            collection_type: Type de bibliotheque
            options: Conventions de nommage

        Returns:
            Les elements resolus et les entrees laissees a l'hote, ou None si
            le dossier ne releve pas de ce service.
        """
        collection, valid = _coerce_collection_type(collection_type)
        if not valid or _is_root(parent):
            return None

        if collection == CollectionType.MUSIC_VIDEOS:
            return self._resolve_videos(
                parent, entries, True, collection, MediaKind.MUSIC_VIDEO, False, options
            )

        if collection in (CollectionType.HOME_VIDEOS, CollectionType.PHOTOS):
            return self._resolve_videos(
                parent, entries, False, collection, MediaKind.VIDEO, False, options
            )

        if collection is None:
            if parent is None:
                return self._resolve_videos(
                    parent, entries, False, collection, MediaKind.VIDEO, False, options
                )
            if parent.is_series:
                return None
            return self._resolve_videos(
                parent, entries, False, collection, MediaKind.MOVIE, True, options
            )

        if collection == CollectionType.MOVIES:
            return self._resolve_videos(
                parent, entries, True, collection, MediaKind.MOVIE, True, options
            )

        return self._resolve_videos(
            parent, entries, True, collection, MediaKind.EPISODE, False, options
        )

    # ------------------------------------------------------------------
    # Resolution d'un dossier
    # ------------------------------------------------------------------

    def _find_movie(
        self,
        path: str,
        parent: Optional[FolderContext],
        entries: Sequence[FileSystemEntry],
        collection: Optional[CollectionType],
        kind: MediaKind,
        parse_name: bool,
        options: NamingOptions,
        enable_photos: bool,
    ) -> Optional[MovieAssemblyResult]:
        """Cherche un film unique (disque, fichier ou multi-disques) dans un dossier."""
        multi_disc_folders: list[FileSystemEntry] = []
        support_photos = collection == CollectionType.HOME_VIDEOS and enable_photos
        photos: list[FileSystemEntry] = []

        for child in entries:
            if child.is_directory:
                if self._disc_detector.is_dvd_directory(child.path, child.name, options):
                    return self._disc_result(path, VideoType.DVD, kind, options)
                if self._disc_detector.is_bluray_directory(child.name, options):
                    return self._disc_result(path, VideoType.BLU_RAY, kind, options)
                multi_disc_folders.append(child)
            elif self._disc_detector.is_dvd_file(child.name, options):
                return self._disc_result(path, VideoType.DVD, kind, options)
            elif support_photos and self._photo_detector.is_image_file(child.path, options):
                photos.append(child)

        result = self._resolve_videos(
            parent, entries, True, collection, kind, parse_name, options
        ) or MovieAssemblyResult()

        if len(result.items) == 1:
            movie = result.items[0]
            has_foreign_photos = any(
                not self._photo_detector.is_owned_by_media(movie.path, photo.name)
                for photo in photos
            )
            if not has_foreign_photos:
                movie.is_in_mixed_folder = False
                movie.name = PurePath(movie.containing_folder_path).name
                return result
        elif not result.items and multi_disc_folders:
            movie = self._get_multi_disc_movie(multi_disc_folders, kind, options)
            if movie is not None:
                return MovieAssemblyResult(items=[movie])

        logger.debug(f"Dossier ambigu, aucun film resolu: {path} ({len(result.items)} element(s))")
        return None

    def _disc_result(
        self, path: str, video_type: VideoType, kind: MediaKind, options: NamingOptions
    ) -> MovieAssemblyResult:
        """Construit le resultat d'un dossier contenant directement une structure de disque."""
        logger.debug(f"Structure {video_type.value} detectee: {path}")
        movie = MovieItem(path=path, name=PurePath(path).name, kind=kind, video_type=video_type)
        self._apply_3d_format(movie, options)
        return MovieAssemblyResult(items=[movie])

    def _get_multi_disc_movie(
        self,
        folders: Sequence[FileSystemEntry],
        kind: MediaKind,
        options: NamingOptions,
    ) -> Optional[MovieItem]:
        """
        Assemble un film reparti sur plusieurs dossiers de disque.

        Chaque dossier doit contenir une structure de disque ; les dossiers
        sans signature sont ecartes. Des types de disque differents, ou un
        decoupage qui ne forme pas exactement une pile, annulent l'assemblage.
        """
        discs: list[DiscFolderInfo] = []
        for folder in folders:
            video_type = self._detect_disc_type(folder.path, options)
            if video_type is None:
                logger.debug(f"Dossier sans structure de disque ecarte: {folder.path}")
                continue
            discs.append(DiscFolderInfo(path=folder.path, video_type=video_type))

        if len({disc.video_type for disc in discs}) > 1:
            logger.debug("Assemblage multi-disques annule: types de disque differents")
            return None

        if not discs:
            return None

        folder_paths = sorted(disc.path for disc in discs)
        discs = [
            DiscFolderInfo(path=folder_path, video_type=discs[0].video_type, index=index)
            for index, folder_path in enumerate(folder_paths)
        ]

        stacks = self._stack_resolver.resolve_stacks_by_directory(folder_paths, options)
        if len(stacks) != 1:
            logger.debug(f"Assemblage multi-disques annule: {len(stacks)} pile(s) au lieu de 1")
            return None

        first = discs[0]
        for disc in discs:
            logger.debug(f"'{stacks[0].name}' disque {disc.index + 1}: {disc.path}")

        return MovieItem(
            path=first.path,
            name=stacks[0].name,
            kind=kind,
            video_type=first.video_type,
            additional_parts=[disc.path for disc in discs if disc.index > first.index],
        )

    def _detect_disc_type(
        self, folder_path: str, options: NamingOptions
    ) -> Optional[VideoType]:
        """Determine le type de disque contenu dans un dossier (un niveau plus bas)."""
        entries = self._directory_lister.list_entries(folder_path)
        subfolders = [entry for entry in entries if entry.is_directory]

        if any(self._disc_detector.is_dvd_directory(s.path, s.name, options) for s in subfolders):
            return VideoType.DVD
        if any(self._disc_detector.is_bluray_directory(s.name, options) for s in subfolders):
            return VideoType.BLU_RAY
        if any(
            self._disc_detector.is_dvd_file(entry.name, options)
            for entry in entries
            if not entry.is_directory
        ):
            return VideoType.DVD
        return None

    # ------------------------------------------------------------------
    # Resolution fichier par fichier
    # ------------------------------------------------------------------

    def _resolve_videos(
        self,
        parent: Optional[FolderContext],
        entries: Sequence[FileSystemEntry],
        support_multi_version: bool,
        collection: Optional[CollectionType],
        kind: MediaKind,
        parse_name: bool,
        options: NamingOptions,
    ) -> Optional[MovieAssemblyResult]:
        """
        Regroupe les fichiers d'un dossier et separe medias principaux et bonus.

        Les sous-dossiers et les fichiers qui ne sont pas des videos sont
        laisses a l'hote dans extra_files ; les echantillons sont ignores.
        """
        files: list[FileSystemEntry] = []
        left_over: list[FileSystemEntry] = []

        for child in entries:
            # Sans type de collection, un marqueur de serie designe un dossier TV
            if collection is None and child.name.lower() in options.series_marker_files:
                return None

            if child.is_directory:
                left_over.append(child)
            elif not options.sample_ignore_pattern.search(child.name):
                files.append(child)

        candidates: list[VideoCandidate] = []
        for entry in files:
            candidate = self._video_parser.parse_video_file(
                entry.path, entry.is_directory, options, parse_name
            )
            if candidate is not None:
                candidates.append(candidate)

        videos = self._grouping_service.group_videos(
            candidates, options, support_multi_version, parse_name
        )

        result = MovieAssemblyResult(extra_files=left_over)
        is_in_mixed_folder = len(videos) > 1 or (parent is not None and parent.is_top_parent)

        for video in videos:
            first = video.primary
            if video.extra_type is not None:
                entry = next((f for f in files if equals_ignore_case(f.path, first.path)), None)
                if entry is not None:
                    result.extra_files.append(entry)
                continue

            result.items.append(
                self._build_item(video, kind, is_in_mixed_folder, parse_name)
            )

        result.extra_files.extend(f for f in files if not _contains_file(videos, f))
        return result

    def _build_item(
        self,
        video: VideoUnit,
        kind: MediaKind,
        is_in_mixed_folder: bool,
        parse_name: bool,
    ) -> MovieItem:
        """Convertit une unite video en element assemble."""
        first = video.primary
        video_type, iso_type, is_placeholder = _video_type_of(first)
        return MovieItem(
            path=first.path,
            name=video.name if parse_name else first.name,
            kind=kind,
            year=video.year,
            video_type=video_type,
            iso_type=iso_type,
            additional_parts=[f.path for f in video.files[1:]],
            alternate_versions=[f.path for f in video.alternate_versions],
            is_in_mixed_folder=is_in_mixed_folder,
            is_placeholder=is_placeholder,
            is_3d=first.is_3d,
            format_3d=first.format_3d,
            container=first.container,
        )

    def _apply_3d_format(self, movie: MovieItem, options: NamingOptions) -> None:
        """Recopie le format 3D lu dans le nom du dossier d'un disque."""
        parsed = self._video_parser.parse_video_file(movie.path, True, options, False)
        if parsed is not None:
            movie.is_3d = parsed.is_3d
            movie.format_3d = parsed.format_3d


def _coerce_collection_type(
    value: CollectionTypeHint,
) -> tuple[Optional[CollectionType], bool]:
    """Normalise l'indication de collection : (type, indication valide)."""
    if value is None or value == "":
        return None, True
    if isinstance(value, CollectionType):
        return value, True
    try:
        return CollectionType(value.lower()), True
    except ValueError:
        return None, False


def _is_root(parent: Optional[FolderContext]) -> bool:
    return parent is not None and parent.is_root


def _contains_file(videos: Sequence[VideoUnit], entry: FileSystemEntry) -> bool:
    """Verifie si une entree est un fichier principal ou une version alternative."""
    return any(
        equals_ignore_case(path, entry.path)
        for video in videos
        for path in video.all_paths()
    )


def _video_type_of(
    candidate: VideoCandidate,
) -> tuple[VideoType, Optional[IsoType], bool]:
    """Forme physique d'un fichier : (type, type d'image disque, stub)."""
    video_type = VideoType.VIDEO_FILE
    if PurePath(candidate.path).suffix.lower() in _ISO_EXTENSIONS:
        video_type = VideoType.ISO

    if candidate.is_stub:
        if candidate.stub_type == "dvd":
            video_type = VideoType.DVD
        elif candidate.stub_type == "bluray":
            video_type = VideoType.BLU_RAY

    iso_type: Optional[IsoType] = None
    if video_type == VideoType.ISO:
        lowered = candidate.path.lower()
        if "dvd" in lowered:
            iso_type = IsoType.DVD
        elif "bluray" in lowered:
            iso_type = IsoType.BLU_RAY

    return video_type, iso_type, candidate.is_stub
