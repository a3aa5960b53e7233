"""
Entites metier representant les concepts du domaine.

Exports:
- VideoCandidate: Fichier ou repertoire considere comme contenu video
- VideoUnit: Unite video logique (fichiers principaux + versions alternatives)
- DiscFolderInfo: Repertoire reconnu comme structure de disque
- MovieItem: Element assemble a l'echelle d'un dossier
- MovieAssemblyResult: Elements assembles et fichiers laisses a l'hote
- FolderContext: Contexte du dossier parent
"""

from src.core.entities.video import (
    DiscFolderInfo,
    FolderContext,
    MovieAssemblyResult,
    MovieItem,
    VideoCandidate,
    VideoUnit,
)

__all__ = [
    "VideoCandidate",
    "VideoUnit",
    "DiscFolderInfo",
    "MovieItem",
    "MovieAssemblyResult",
    "FolderContext",
]
