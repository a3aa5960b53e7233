"""
Implementation du resolveur de piles par expressions regulieres.

Ce module fournit RegexStackResolver qui implemente IStackResolver pour
reconnaitre les contenus decoupes en plusieurs parties :

    Film cd1.avi / Film cd2.avi
    Film part1.mkv / Film part2.mkv
    Film/Disc A / Film/Disc B
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import PurePath

from src.core.ports.stacking import IStackResolver
from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.naming_options import NamingOptions
from src.core.value_objects.stack import StackedGroup
from src.utils.naming import equals_ignore_case


@dataclass
class _PendingStack:
    """Pile en cours de construction, indexee par son nom."""

    is_directory: bool
    is_numerical: bool
    part_type: str
    parts: dict[str, str] = field(default_factory=dict)


class RegexStackResolver(IStackResolver):
    """
    Resolveur de piles base sur les regles d'empilement de NamingOptions.

    Chaque regle decoupe un nom en (nom de pile, type de partie, numero).
    Les parties d'une meme pile doivent partager la nature (fichier ou
    repertoire), le type de partie et la numerotation (chiffres ou lettres).
    """

    def resolve_stacks(
        self, entries: Sequence[FileSystemEntry], options: NamingOptions
    ) -> list[StackedGroup]:
        """
        Regroupe des entrees en piles.

        Seuls les repertoires et les fichiers video ou stub sont consideres,
        traites dans l'ordre de leurs chemins.

        Args:
            entries: Fichiers et repertoires candidats
            options: Conventions de nommage

        Returns:
            Les piles d'au moins deux parties, dans l'ordre de decouverte.
        """
        candidates = sorted(
            (entry for entry in entries if self._is_candidate(entry, options)),
            key=lambda entry: entry.path,
        )

        pending: dict[str, _PendingStack] = {}
        for entry in candidates:
            name = entry.name or PurePath(entry.path).name
            for rule in options.stacking_rules:
                part = rule.match(name)
                if part is None:
                    continue

                stack = pending.get(part.stack_name)
                if stack is None:
                    stack = _PendingStack(
                        is_directory=entry.is_directory,
                        is_numerical=rule.is_numerical,
                        part_type=part.part_type,
                    )
                    pending[part.stack_name] = stack

                if stack.parts:
                    if (
                        stack.is_directory != entry.is_directory
                        or not equals_ignore_case(part.part_type, stack.part_type)
                        or part.part_number in stack.parts
                    ):
                        continue
                    if stack.is_numerical != rule.is_numerical:
                        break

                stack.parts[part.part_number] = entry.path
                break

        return [
            StackedGroup(
                name=stack_name,
                files=tuple(stack.parts.values()),
                is_directory_stack=stack.is_directory,
            )
            for stack_name, stack in pending.items()
            if len(stack.parts) >= 2
        ]

    def resolve_stacks_by_directory(
        self, paths: Sequence[str], options: NamingOptions
    ) -> list[StackedGroup]:
        """Regroupe des repertoires entiers (Disc 1, Disc 2) en piles."""
        entries = [FileSystemEntry.from_path(path, is_directory=True) for path in paths]
        return self.resolve_stacks(entries, options)

    @staticmethod
    def _is_candidate(entry: FileSystemEntry, options: NamingOptions) -> bool:
        if entry.is_directory:
            return True
        extension = PurePath(entry.path).suffix
        return options.is_video_extension(extension) or options.is_stub_extension(extension)
