"""
Tests unitaires pour MovieAssemblerService.

Les detecteurs de disque et de photos sont reels ; le contenu des
sous-dossiers est fourni par un listeur de repertoires en memoire.
"""

from unittest.mock import MagicMock

from dataclasses import replace

import pytest

from conftest import FakeDirectoryLister, FakeVideoParser
from src.adapters.naming.disc_detector import DiscDetector
from src.adapters.naming.noise_cleaner import RegexNoiseCleaner
from src.adapters.naming.photo_detector import ExtensionPhotoDetector
from src.adapters.naming.stack_resolver import RegexStackResolver
from src.core.entities.video import FolderContext
from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.media_kind import CollectionType, IsoType, MediaKind, VideoType
from src.core.value_objects.naming_options import NamingOptions
from src.core.value_objects.parsed_info import ExtraType
from src.services.movie_assembler import MovieAssemblerService
from src.services.multi_version import MultiVersionClassifier
from src.services.video_grouping import VideoGroupingService

LIBRARY = FolderContext(path="/m")


def _entries(folder: str, *names: str) -> list[FileSystemEntry]:
    """Entrees d'un dossier ; un nom termine par '/' designe un repertoire."""
    return [
        FileSystemEntry.from_path(f"{folder}/{name.rstrip('/')}", is_directory=name.endswith("/"))
        for name in names
    ]


def _dvd_folder(lister: FakeDirectoryLister, folder: str) -> None:
    """Declare un dossier contenant une structure VIDEO_TS."""
    lister.tree[folder] = _entries(folder, "VIDEO_TS/")
    lister.tree[f"{folder}/VIDEO_TS"] = _entries(f"{folder}/VIDEO_TS", "VTS_01_1.VOB")


def _bluray_folder(lister: FakeDirectoryLister, folder: str) -> None:
    lister.tree[folder] = _entries(folder, "BDMV/")


def _build_assembler(
    parser: FakeVideoParser,
    lister: FakeDirectoryLister,
    episode_parser: MagicMock,
) -> MovieAssemblerService:
    stack_resolver = RegexStackResolver()
    classifier = MultiVersionClassifier(episode_parser, RegexNoiseCleaner())
    return MovieAssemblerService(
        video_parser=parser,
        grouping_service=VideoGroupingService(stack_resolver, parser, classifier),
        stack_resolver=stack_resolver,
        disc_detector=DiscDetector(lister),
        photo_detector=ExtensionPhotoDetector(),
        directory_lister=lister,
    )


@pytest.fixture
def lister() -> FakeDirectoryLister:
    return FakeDirectoryLister()


@pytest.fixture
def parser() -> FakeVideoParser:
    return FakeVideoParser()


@pytest.fixture
def assembler(
    parser: FakeVideoParser,
    lister: FakeDirectoryLister,
    mock_episode_parser: MagicMock,
    naming_options: NamingOptions,
) -> MovieAssemblerService:
    return _build_assembler(parser, lister, mock_episode_parser)


class TestResolveMovieFolder:
    """Tests de la resolution d'un dossier en film unique."""

    def test_single_file_takes_folder_name(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Alpha (2010)"
        entries = _entries(folder, "Alpha.2010.mkv", "Alpha.nfo")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        assert len(result.items) == 1
        movie = result.items[0]
        assert movie.path == f"{folder}/Alpha.2010.mkv"
        assert movie.name == "Alpha (2010)"
        assert movie.kind == MediaKind.MOVIE
        assert movie.container == "mkv"
        assert movie.video_type == VideoType.VIDEO_FILE
        assert movie.is_in_mixed_folder is False
        assert [entry.name for entry in result.extra_files] == ["Alpha.nfo"]

    def test_versions_collapse_to_one_movie(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Alpha"
        entries = _entries(folder, "Alpha - 1080p.mkv", "Alpha - 720p.mkv")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        movie = result.items[0]
        assert movie.path == f"{folder}/Alpha - 1080p.mkv"
        assert movie.alternate_versions == [f"{folder}/Alpha - 720p.mkv"]
        assert movie.name == "Alpha"

    def test_stacked_parts(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Film"
        entries = _entries(folder, "Film cd1.avi", "Film cd2.avi")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        assert result.items[0].additional_parts == [f"{folder}/Film cd2.avi"]

    def test_two_unrelated_movies_are_ambiguous(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Misc"
        entries = _entries(folder, "Alpha.mkv", "Beta.mkv")

        assert (
            assembler.resolve_movie_folder(
                folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
            )
            is None
        )

    def test_empty_folder(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        assert (
            assembler.resolve_movie_folder("/m/Empty", LIBRARY, [], CollectionType.MOVIES, naming_options)
            is None
        )


class TestDiscStructures:
    """Tests de la reconnaissance des structures de disque."""

    def test_dvd_directory_short_circuits(
        self,
        assembler: MovieAssemblerService,
        lister: FakeDirectoryLister,
        naming_options: NamingOptions,
    ) -> None:
        """Un dossier VIDEO_TS donne un DVD ; les fichiers voisins sont ignores."""
        folder = "/m/Film"
        _dvd_folder(lister, folder)
        entries = _entries(folder, "VIDEO_TS/", "Bonus.mkv", "Other.mkv")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        assert len(result.items) == 1
        movie = result.items[0]
        assert movie.path == folder
        assert movie.video_type == VideoType.DVD
        assert movie.containing_folder_path == folder
        assert result.extra_files == []

    def test_video_ts_without_vob_is_not_a_dvd(
        self,
        assembler: MovieAssemblerService,
        lister: FakeDirectoryLister,
        naming_options: NamingOptions,
    ) -> None:
        folder = "/m/Film"
        lister.tree[f"{folder}/VIDEO_TS"] = _entries(f"{folder}/VIDEO_TS", "VIDEO_TS.BUP")
        entries = _entries(folder, "VIDEO_TS/", "Film.mkv")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        assert result.items[0].video_type == VideoType.VIDEO_FILE
        assert result.items[0].path == f"{folder}/Film.mkv"

    def test_bluray_directory(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Film"
        entries = _entries(folder, "BDMV/", "CERTIFICATE/")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        assert result.items[0].video_type == VideoType.BLU_RAY

    def test_dvd_file_signature(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Film"
        entries = _entries(folder, "VIDEO_TS.IFO", "VTS_01_1.VOB")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        assert result.items[0].video_type == VideoType.DVD
        assert result.items[0].path == folder

    def test_disc_names_come_from_call_options(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Film"
        entries = _entries(folder, "BDAV/")
        custom = replace(naming_options, bluray_directory_name="bdav")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, custom
        )

        assert result is not None
        assert result.items[0].video_type == VideoType.BLU_RAY
        assert assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        ) is None


class TestMultiDisc:
    """Tests de l'assemblage des films multi-disques."""

    def test_two_dvd_folders(
        self,
        assembler: MovieAssemblerService,
        lister: FakeDirectoryLister,
        naming_options: NamingOptions,
    ) -> None:
        folder = "/m/Film"
        _dvd_folder(lister, f"{folder}/Film - Disc 2")
        _dvd_folder(lister, f"{folder}/Film - Disc 1")
        entries = _entries(folder, "Film - Disc 2/", "Film - Disc 1/")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        movie = result.items[0]
        assert movie.path == f"{folder}/Film - Disc 1"
        assert movie.additional_parts == [f"{folder}/Film - Disc 2"]
        assert movie.video_type == VideoType.DVD
        assert movie.name == "Film"

    def test_discs_follow_sorted_order(
        self,
        assembler: MovieAssemblerService,
        lister: FakeDirectoryLister,
        naming_options: NamingOptions,
    ) -> None:
        folder = "/m/Film"
        for disc in ("Film - Disc 3", "Film - Disc 1", "Film - Disc 2"):
            _bluray_folder(lister, f"{folder}/{disc}")
        entries = _entries(folder, "Film - Disc 3/", "Film - Disc 1/", "Film - Disc 2/")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        movie = result.items[0]
        assert movie.path == f"{folder}/Film - Disc 1"
        assert movie.additional_parts == [f"{folder}/Film - Disc 2", f"{folder}/Film - Disc 3"]
        assert movie.video_type == VideoType.BLU_RAY

    def test_folder_without_disc_is_dropped(
        self,
        assembler: MovieAssemblerService,
        lister: FakeDirectoryLister,
        naming_options: NamingOptions,
    ) -> None:
        folder = "/m/Film"
        _bluray_folder(lister, f"{folder}/Film - Disc 1")
        _bluray_folder(lister, f"{folder}/Film - Disc 2")
        lister.tree[f"{folder}/Extras"] = _entries(f"{folder}/Extras", "notes.txt")
        entries = _entries(folder, "Extras/", "Film - Disc 1/", "Film - Disc 2/")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        movie = result.items[0]
        assert movie.video_type == VideoType.BLU_RAY
        assert movie.additional_parts == [f"{folder}/Film - Disc 2"]

    def test_mixed_disc_types_abort(
        self,
        assembler: MovieAssemblerService,
        lister: FakeDirectoryLister,
        naming_options: NamingOptions,
    ) -> None:
        folder = "/m/Film"
        _dvd_folder(lister, f"{folder}/Film - Disc 1")
        _bluray_folder(lister, f"{folder}/Film - Disc 2")
        entries = _entries(folder, "Film - Disc 1/", "Film - Disc 2/")

        assert (
            assembler.resolve_movie_folder(
                folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
            )
            is None
        )

    def test_folders_that_do_not_stack_abort(
        self,
        assembler: MovieAssemblerService,
        lister: FakeDirectoryLister,
        naming_options: NamingOptions,
    ) -> None:
        folder = "/m/Films"
        _dvd_folder(lister, f"{folder}/Alpha")
        _dvd_folder(lister, f"{folder}/Beta")
        entries = _entries(folder, "Alpha/", "Beta/")

        assert (
            assembler.resolve_movie_folder(
                folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
            )
            is None
        )

    def test_no_disc_folder_at_all(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Film"
        entries = _entries(folder, "Film - Disc 1/", "Film - Disc 2/")

        assert (
            assembler.resolve_movie_folder(
                folder, LIBRARY, entries, CollectionType.MOVIES, naming_options
            )
            is None
        )


class TestPhotos:
    """Tests des photos d'accompagnement (videos personnelles)."""

    def test_foreign_photo_rejects_folder(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Trip"
        entries = _entries(folder, "Trip.mkv", "Beach.jpg")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.HOME_VIDEOS, naming_options,
            enable_photos=True,
        )

        assert result is None

    def test_owned_photo_and_artwork_are_accepted(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Trip"
        entries = _entries(folder, "Trip.mkv", "trip-01.jpg", "folder.jpg")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.HOME_VIDEOS, naming_options,
            enable_photos=True,
        )

        assert result is not None
        assert result.items[0].kind == MediaKind.VIDEO

    def test_image_extensions_come_from_call_options(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Trip"
        entries = _entries(folder, "Trip.mkv", "Beach.pano")
        custom = replace(naming_options, image_file_extensions=frozenset({".pano"}))

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.HOME_VIDEOS, custom,
            enable_photos=True,
        )

        assert result is None
        assert assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.HOME_VIDEOS, naming_options,
            enable_photos=True,
        ) is not None

    def test_photos_ignored_when_disabled(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Trip"
        entries = _entries(folder, "Trip.mkv", "Beach.jpg")

        result = assembler.resolve_movie_folder(
            folder, LIBRARY, entries, CollectionType.HOME_VIDEOS, naming_options
        )

        assert result is not None


class TestCollectionDispatch:
    """Tests du choix du type d'element selon la bibliotheque."""

    @pytest.mark.parametrize(
        ("collection_type", "kind"),
        [
            (CollectionType.MOVIES, MediaKind.MOVIE),
            ("Movies", MediaKind.MOVIE),
            (CollectionType.MUSIC_VIDEOS, MediaKind.MUSIC_VIDEO),
            (CollectionType.HOME_VIDEOS, MediaKind.VIDEO),
            (None, MediaKind.MOVIE),
        ],
    )
    def test_kind_per_collection(
        self,
        assembler: MovieAssemblerService,
        naming_options: NamingOptions,
        collection_type,
        kind: MediaKind,
    ) -> None:
        folder = "/m/Alpha"
        result = assembler.resolve_movie_folder(
            folder, LIBRARY, _entries(folder, "Alpha.mkv"), collection_type, naming_options
        )

        assert result is not None
        assert result.items[0].kind == kind

    @pytest.mark.parametrize(
        ("parent", "collection_type"),
        [
            (FolderContext(path="/", is_root=True), CollectionType.MOVIES),
            (LIBRARY, CollectionType.TV_SHOWS),
            (LIBRARY, CollectionType.PHOTOS),
            (LIBRARY, "boxsets"),
            (None, None),
            (FolderContext(path="/m/Show", is_series=True), None),
        ],
    )
    def test_folder_not_handled(
        self,
        assembler: MovieAssemblerService,
        naming_options: NamingOptions,
        parent,
        collection_type,
    ) -> None:
        folder = "/m/Alpha"
        assert (
            assembler.resolve_movie_folder(
                folder, parent, _entries(folder, "Alpha.mkv"), collection_type, naming_options
            )
            is None
        )


class TestResolveMultiple:
    """Tests de la resolution d'un dossier en plusieurs elements."""

    def test_items_and_extra_files(
        self,
        mock_episode_parser: MagicMock,
        lister: FakeDirectoryLister,
        naming_options: NamingOptions,
    ) -> None:
        folder = "/m/All"
        parser = FakeVideoParser(extras={f"{folder}/Alpha-trailer.mkv": ExtraType.TRAILER})
        assembler = _build_assembler(parser, lister, mock_episode_parser)
        entries = _entries(
            folder, "Alpha.mkv", "Alpha-trailer.mkv", "Beta.mkv", "Sub/", "readme.txt"
        )

        result = assembler.resolve_multiple(
            FolderContext(path=folder), entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        assert [item.name for item in result.items] == ["Alpha", "Beta"]
        assert all(item.is_in_mixed_folder for item in result.items)
        assert [entry.name for entry in result.extra_files] == [
            "Sub",
            "Alpha-trailer.mkv",
            "readme.txt",
        ]

    def test_samples_are_ignored(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Alpha"
        entries = _entries(folder, "Alpha.mkv", "Alpha.sample.mkv")

        result = assembler.resolve_multiple(
            FolderContext(path=folder), entries, CollectionType.MOVIES, naming_options
        )

        assert result is not None
        assert [item.path for item in result.items] == [f"{folder}/Alpha.mkv"]
        assert result.extra_files == []

    def test_series_marker_without_collection(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Show"
        entries = _entries(folder, "tvshow.nfo", "Show S01E01.mkv")

        assert (
            assembler.resolve_multiple(FolderContext(path=folder), entries, None, naming_options)
            is None
        )

    def test_top_parent_marks_mixed_folder(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m"
        result = assembler.resolve_multiple(
            FolderContext(path=folder, is_top_parent=True),
            _entries(folder, "Alpha.mkv"),
            CollectionType.MOVIES,
            naming_options,
        )

        assert result is not None
        assert result.items[0].is_in_mixed_folder is True

    def test_home_videos_do_not_merge_versions(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Alpha"
        entries = _entries(folder, "Alpha - 1080p.mkv", "Alpha - 720p.mkv")

        result = assembler.resolve_multiple(
            FolderContext(path=folder), entries, CollectionType.HOME_VIDEOS, naming_options
        )

        assert result is not None
        assert len(result.items) == 2
        assert all(item.kind == MediaKind.VIDEO for item in result.items)

    @pytest.mark.parametrize(
        ("parent", "collection_type", "kind"),
        [
            (LIBRARY, CollectionType.TV_SHOWS, MediaKind.EPISODE),
            (LIBRARY, CollectionType.MUSIC_VIDEOS, MediaKind.MUSIC_VIDEO),
            (LIBRARY, CollectionType.PHOTOS, MediaKind.VIDEO),
            (None, None, MediaKind.VIDEO),
            (LIBRARY, None, MediaKind.MOVIE),
        ],
    )
    def test_kind_per_collection(
        self,
        assembler: MovieAssemblerService,
        naming_options: NamingOptions,
        parent,
        collection_type,
        kind: MediaKind,
    ) -> None:
        result = assembler.resolve_multiple(
            parent, _entries("/m/Alpha", "Alpha.mkv"), collection_type, naming_options
        )

        assert result is not None
        assert result.items[0].kind == kind

    @pytest.mark.parametrize(
        ("parent", "collection_type"),
        [
            (FolderContext(path="/", is_root=True), CollectionType.MOVIES),
            (LIBRARY, "boxsets"),
            (FolderContext(path="/m/Show", is_series=True), None),
        ],
    )
    def test_not_handled(
        self,
        assembler: MovieAssemblerService,
        naming_options: NamingOptions,
        parent,
        collection_type,
    ) -> None:
        assert (
            assembler.resolve_multiple(
                parent, _entries("/m/Alpha", "Alpha.mkv"), collection_type, naming_options
            )
            is None
        )

    def test_iso_type_from_name(
        self, assembler: MovieAssemblerService, naming_options: NamingOptions
    ) -> None:
        folder = "/m/Film"
        result = assembler.resolve_multiple(
            FolderContext(path=folder),
            _entries(folder, "Film.dvd.iso"),
            CollectionType.MOVIES,
            naming_options,
        )

        assert result is not None
        assert result.items[0].video_type == VideoType.ISO
        assert result.items[0].iso_type == IsoType.DVD
