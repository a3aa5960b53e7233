"""
Interface port pour l'empilement des fichiers multi-parties.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.naming_options import NamingOptions
from src.core.value_objects.stack import StackedGroup


class IStackResolver(ABC):
    """
    Interface de regroupement des parties d'un meme contenu.

    Reconnait les fichiers (ou repertoires) partageant un motif de nom
    "meme contenu, partie differente" (CD1/CD2, part1/part2, disc A/B).
    """

    @abstractmethod
    def resolve_stacks(
        self, entries: Sequence[FileSystemEntry], options: NamingOptions
    ) -> list[StackedGroup]:
        """
        Regroupe des entrees en piles.

        Args:
            entries: Fichiers et repertoires candidats
            options: Conventions de nommage (regles d'empilement, extensions)

        Retourne:
            Les piles d'au moins deux parties, dans l'ordre de decouverte.
        """
        ...

    @abstractmethod
    def resolve_stacks_by_directory(
        self, paths: Sequence[str], options: NamingOptions
    ) -> list[StackedGroup]:
        """
        Regroupe des repertoires entiers en piles (dossiers multi-disques).

        Args:
            paths: Chemins de repertoires
            options: Conventions de nommage

        Retourne:
            Les piles de repertoires d'au moins deux parties.
        """
        ...
