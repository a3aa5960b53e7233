"""
Fixtures pytest partagees pour les tests CineGroup.

Ce module contient les fixtures communes utilisees dans les tests:
- Conventions de nommage par defaut (NamingOptions)
- Fabrique de candidats video
- Faux adaptateurs (parser video, listeur de repertoires) et mocks des ports
- Settings de test avec chemins temporaires
"""

from collections.abc import Callable, Sequence
from pathlib import Path, PurePath
from typing import Optional
from unittest.mock import MagicMock

import pytest

from src.adapters.naming.noise_cleaner import RegexNoiseCleaner
from src.config import Settings
from src.core.entities.video import VideoCandidate
from src.core.ports.file_system import IDirectoryLister
from src.core.ports.parser import IEpisodeParser, IVideoParser
from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.naming_options import NamingOptions
from src.core.value_objects.parsed_info import ExtraType


class FakeVideoParser(IVideoParser):
    """
    Parser video deterministe pour les tests.

    Le nom est le nom de fichier sans extension ; annee et type de bonus
    sont lus dans des dictionnaires indexes par chemin. Les chemins de
    rejected sont refuses (None).
    """

    def __init__(
        self,
        years: Optional[dict[str, int]] = None,
        extras: Optional[dict[str, ExtraType]] = None,
        rejected: Sequence[str] = (),
    ) -> None:
        self.years = years or {}
        self.extras = extras or {}
        self.rejected = set(rejected)

    def parse_video_file(
        self,
        path: str,
        is_directory: bool,
        options: NamingOptions,
        parse_name: bool = True,
    ) -> Optional[VideoCandidate]:
        if path in self.rejected:
            return None
        pure = PurePath(path)
        if not is_directory and not options.is_video_extension(pure.suffix):
            return None
        return VideoCandidate(
            path=path,
            is_directory=is_directory,
            name=pure.name if is_directory else pure.stem,
            year=self.years.get(path),
            extra_type=self.extras.get(path),
            container=None if is_directory else pure.suffix.lstrip(".").lower(),
        )


class FakeDirectoryLister(IDirectoryLister):
    """Listeur de repertoires en memoire : {repertoire: [chemins enfants]}."""

    def __init__(self, tree: Optional[dict[str, list[FileSystemEntry]]] = None) -> None:
        self.tree = tree or {}

    def list_entries(self, directory: str) -> list[FileSystemEntry]:
        return sorted(self.tree.get(directory, []), key=lambda entry: entry.path)


@pytest.fixture(scope="session")
def naming_options() -> NamingOptions:
    """Conventions de nommage par defaut (compilees une seule fois)."""
    return NamingOptions.build()


@pytest.fixture
def make_candidate() -> Callable[..., VideoCandidate]:
    """
    Fabrique de VideoCandidate.

    Le nom par defaut est le nom de fichier sans extension.
    """

    def _make(path: str, **kwargs) -> VideoCandidate:
        kwargs.setdefault("name", PurePath(path).stem)
        return VideoCandidate(path=path, **kwargs)

    return _make


@pytest.fixture
def mock_episode_parser() -> MagicMock:
    """
    Mock de IEpisodeParser.

    Par defaut aucun chemin n'est reconnu comme episode.
    """
    mock = MagicMock(spec=IEpisodeParser)
    mock.parse_episode.return_value = None
    return mock


@pytest.fixture
def noise_cleaner() -> RegexNoiseCleaner:
    """Nettoyeur de jetons reel (sans dependance externe)."""
    return RegexNoiseCleaner()


@pytest.fixture
def fake_video_parser() -> FakeVideoParser:
    """Parser video deterministe acceptant toute extension video."""
    return FakeVideoParser()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles du fichier .env et des variables d'environnement."""
    return Settings(
        _env_file=None,
        log_file=tmp_path / "logs" / "test.log",
    )
