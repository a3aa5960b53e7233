"""
Point d'entrée CLI de CineGroup.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli import group, movie
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity

app = typer.Typer(
    name="cinegroup",
    help="Regroupement de fichiers vidéo en unités logiques",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CineGroup - Regroupement de fichiers vidéo."""
    settings = Settings()
    configure_logging(
        log_level=level_from_verbosity(verbose, quiet, default=settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Commandes de regroupement
app.command()(group)
app.command()(movie)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineGroup")
    typer.echo(f"Versions multiples : {'activées' if config.support_multi_version else 'désactivées'}")
    typer.echo(f"Nettoyage des noms : {'activé' if config.parse_names else 'désactivé'}")
    typer.echo(f"Photos : {'activées' if config.enable_photos else 'désactivées'}")
    extensions = ", ".join(config.extra_video_extensions) or "aucune"
    typer.echo(f"Extensions vidéo supplémentaires : {extensions}")
    typer.echo(f"Expressions de nettoyage supplémentaires : {len(config.extra_clean_string_patterns)}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineGroup v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
