"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, niveau piloté par -v / -q
- Sortie fichier : sérialisée en JSON, avec rotation, trace des décisions de regroupement
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_VERBOSITY_LEVELS = ("INFO", "DEBUG", "TRACE")


def level_from_verbosity(verbose: int, quiet: bool, default: str = "WARNING") -> str:
    """Traduit les options -v/-q de la CLI en niveau de log console.

    Args :
        verbose : Nombre d'options -v (0 = niveau par défaut)
        quiet : True pour n'afficher que les erreurs
        default : Niveau utilisé sans -v ni -q

    Returns :
        Nom du niveau loguru (ERROR, WARNING, INFO, DEBUG, TRACE).
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS)) - 1]


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/cinegroup.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console
        log_file : Chemin vers le fichier de log (None pour désactiver le fichier)
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Les décisions de regroupement sont tracées en DEBUG
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), console_level=log_level)
