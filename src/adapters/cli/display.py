"""
Affichage Rich des resultats de regroupement.

Fournit les tables des unites video (commande group) et des elements
assembles (commande movie).
"""

from collections.abc import Sequence
from pathlib import PurePath

from rich.console import Console
from rich.table import Table

from src.core.entities.video import MovieAssemblyResult, VideoUnit

# Console globale pour tous les affichages
console = Console()


def _file_name(path: str) -> str:
    return PurePath(path).name


def _format_year(year: object) -> str:
    return str(year) if year is not None else "-"


def display_units(units: Sequence[VideoUnit], title: str = "Unites video") -> None:
    """
    Affiche les unites video issues du regroupement.

    Args:
        units: Unites retournees par VideoGroupingService
        title: Titre de la table
    """
    table = Table(title=title, show_header=True)
    table.add_column("Nom", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Type")
    table.add_column("Fichiers")
    table.add_column("Versions alternatives", style="dim")

    for unit in units:
        kind = unit.extra_type.value if unit.extra_type is not None else "principal"
        table.add_row(
            unit.name,
            _format_year(unit.year),
            kind,
            "\n".join(f.file_name for f in unit.files),
            "\n".join(f.file_name for f in unit.alternate_versions),
        )

    console.print(table)
    console.print(f"[bold]{len(units)}[/bold] unite(s)")


def display_assembly(result: MovieAssemblyResult, title: str = "Elements resolus") -> None:
    """
    Affiche le resultat de l'assemblage d'un dossier.

    Args:
        result: Resultat retourne par MovieAssemblerService
        title: Titre de la table
    """
    table = Table(title=title, show_header=True)
    table.add_column("Nom", style="bold")
    table.add_column("Annee", justify="right")
    table.add_column("Support")
    table.add_column("Conteneur")
    table.add_column("Chemin")
    table.add_column("Parties", style="dim")
    table.add_column("Versions", style="dim")

    for item in result.items:
        support = item.video_type.value
        if item.is_3d:
            support += f" 3D ({item.format_3d})" if item.format_3d else " 3D"
        table.add_row(
            item.name,
            _format_year(item.year),
            support,
            item.container or "-",
            _file_name(item.path),
            "\n".join(_file_name(p) for p in item.additional_parts),
            "\n".join(_file_name(p) for p in item.alternate_versions),
        )

    console.print(table)

    if result.extra_files:
        console.print("[bold]Fichiers laisses a l'hote :[/bold]")
        for entry in result.extra_files:
            marker = "/" if entry.is_directory else ""
            console.print(f"  [dim]{entry.name}{marker}[/dim]")
