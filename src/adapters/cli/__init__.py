"""
Interface ligne de commande (Typer + Rich).

Commandes de regroupement montees par src.main.
"""

from .grouping_commands import group, movie

__all__ = ["group", "movie"]
