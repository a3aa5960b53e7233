"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI : configuration,
conventions de nommage, adaptateurs (ports) et services de regroupement.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .adapters.naming import (
    DiscDetector,
    ExtensionPhotoDetector,
    RegexNoiseCleaner,
    RegexStackResolver,
)
from .adapters.parsing import GuessitEpisodeParser, GuessitVideoParser
from .config import Settings
from .core.value_objects.naming_options import NamingOptions
from .services.movie_assembler import MovieAssemblerService
from .services.multi_version import MultiVersionClassifier
from .services.video_grouping import VideoGroupingService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Tous les adaptateurs et services sont sans etat : Singletons partages.

    Utilisation :
        container = Container()
        options = container.naming_options()
        units = container.grouping_service().group_videos(candidates, options)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Conventions de nommage compilees une seule fois depuis la configuration
    naming_options = providers.Singleton(
        NamingOptions.build,
        extra_video_extensions=config.provided.extra_video_extensions,
        extra_clean_string_patterns=config.provided.extra_clean_string_patterns,
    )

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)
    stack_resolver = providers.Singleton(RegexStackResolver)
    noise_cleaner = providers.Singleton(RegexNoiseCleaner)
    episode_parser = providers.Singleton(GuessitEpisodeParser)
    video_parser = providers.Singleton(
        GuessitVideoParser,
        noise_cleaner=noise_cleaner,
    )
    disc_detector = providers.Singleton(
        DiscDetector,
        directory_lister=file_system,  # FileSystemAdapter implemente IDirectoryLister
    )
    photo_detector = providers.Singleton(ExtensionPhotoDetector)

    # Services
    version_classifier = providers.Singleton(
        MultiVersionClassifier,
        episode_parser=episode_parser,
        noise_cleaner=noise_cleaner,
    )
    grouping_service = providers.Singleton(
        VideoGroupingService,
        stack_resolver=stack_resolver,
        video_parser=video_parser,
        classifier=version_classifier,
    )
    movie_assembler = providers.Singleton(
        MovieAssemblerService,
        video_parser=video_parser,
        grouping_service=grouping_service,
        stack_resolver=stack_resolver,
        disc_detector=disc_detector,
        photo_detector=photo_detector,
        directory_lister=file_system,
    )
