"""Commandes CLI group et movie : regroupement des videos d'un dossier."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from src.adapters.cli.display import console, display_assembly, display_units
from src.container import Container
from src.core.entities.video import FolderContext, VideoCandidate
from src.core.exceptions import NamingConfigurationError
from src.core.value_objects.naming_options import NamingOptions


def _load_naming_options(container: Container) -> NamingOptions:
    """Compile les conventions de nommage, ou quitte avec le code 2."""
    try:
        return container.naming_options()
    except NamingConfigurationError as e:
        console.print(f"[red]Configuration invalide :[/red] {e}")
        raise typer.Exit(code=2)


def _require_directory(container: Container, directory: Path) -> None:
    """Quitte avec le code 1 si le repertoire n'existe pas."""
    if not container.file_system().is_dir(directory):
        console.print(f"[red]Repertoire introuvable :[/red] {directory}")
        raise typer.Exit(code=1)


def group(
    directory: Annotated[
        Path,
        typer.Argument(help="Dossier dont les videos sont a regrouper"),
    ],
    no_multi_version: Annotated[
        bool,
        typer.Option("--no-multi-version", help="Ne pas fusionner les versions alternatives"),
    ] = False,
    raw_names: Annotated[
        bool,
        typer.Option("--raw-names", help="Garder les noms de fichiers sans nettoyage"),
    ] = False,
) -> None:
    """Regroupe les videos d'un dossier en unites (parties, versions, bonus)."""
    container = Container()
    config = container.config()
    _require_directory(container, directory)
    options = _load_naming_options(container)

    support_multi_version = config.support_multi_version and not no_multi_version
    parse_name = config.parse_names and not raw_names

    parser = container.video_parser()
    candidates: list[VideoCandidate] = []
    for entry in container.file_system().list_entries(directory):
        candidate = parser.parse_video_file(entry.path, entry.is_directory, options, parse_name)
        if candidate is not None:
            candidates.append(candidate)

    logger.info(f"{len(candidates)} candidat(s) video dans {directory}")

    units = container.grouping_service().group_videos(
        candidates, options, support_multi_version, parse_name
    )
    display_units(units, title=f"Unites video : {directory.name}")


def movie(
    directory: Annotated[
        Path,
        typer.Argument(help="Dossier a resoudre comme un film unique"),
    ],
    collection_type: Annotated[
        Optional[str],
        typer.Option(
            "--collection-type",
            "-c",
            help="Type de bibliotheque (movies, homevideos, musicvideos, tvshows, photos)",
        ),
    ] = None,
) -> None:
    """Resout un dossier comme un titre unique (fichier, DVD, Blu-ray, multi-disques)."""
    container = Container()
    config = container.config()
    _require_directory(container, directory)
    options = _load_naming_options(container)

    resolved = directory.resolve()
    entries = container.file_system().list_entries(resolved)
    parent = FolderContext(path=str(resolved.parent))

    result = container.movie_assembler().resolve_movie_folder(
        str(resolved),
        parent,
        entries,
        collection_type,
        options,
        enable_photos=config.enable_photos,
    )

    if result is None:
        console.print(f"[yellow]Aucun film unique dans[/yellow] {directory}")
        return

    display_assembly(result, title=f"Film : {directory.name}")
