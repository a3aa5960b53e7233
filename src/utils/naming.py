"""
Fonctions utilitaires sur les noms de videos.

Fonctions pures, sans acces au systeme de fichiers :
- strip_version_suffix : retrait du suffixe de version " - 1080p"
- same_year : verifie que des unites partagent la meme annee
- starts_with_ignore_case / equals_ignore_case : comparaisons insensibles a la casse
- ordinal_sort_key : cle de tri ordinale (point de code), independante de la locale
- file_stem / parent_folder_name : decoupage de chemins sous forme de chaines
"""

from collections.abc import Sequence
from pathlib import PurePath
from typing import Optional, Protocol

_NO_YEAR = -1
_VERSION_SEPARATOR = " -"


class _HasYear(Protocol):
    year: Optional[int]


def strip_version_suffix(name: Optional[str]) -> str:
    """
    Retire le suffixe de version d'un nom d'affichage.

    Coupe a la derniere occurrence de " -" (espace, tiret).

    Exemples:
        "Movie - 1080p" -> "Movie"
        "Movie - A - B" -> "Movie - A"
        "Movie" -> "Movie"
    """
    if not name:
        return ""
    index = name.rfind(_VERSION_SEPARATOR)
    if index == -1:
        return name
    return name[:index]


def same_year(units: Sequence[_HasYear]) -> bool:
    """
    Verifie que toutes les unites partagent la meme annee.

    L'absence d'annee est une valeur a part entiere (egale a elle-meme).
    """
    if len(units) <= 1:
        return True

    first_year = _year_or_sentinel(units[0].year)
    return all(_year_or_sentinel(unit.year) == first_year for unit in units[1:])


def _year_or_sentinel(year: Optional[int]) -> int:
    return _NO_YEAR if year is None else year


def starts_with_ignore_case(text: Optional[str], prefix: Optional[str]) -> bool:
    """Teste si text commence par prefix, sans tenir compte de la casse."""
    if text is None or prefix is None:
        return False
    if len(prefix) > len(text):
        return False
    # Comparaison caractere par caractere : lower() peut changer la longueur
    return all(
        a == b or a.lower() == b.lower()
        for a, b in zip(text[: len(prefix)], prefix)
    )


def equals_ignore_case(a: Optional[str], b: Optional[str]) -> bool:
    """Egalite de chaines insensible a la casse."""
    if a is None or b is None:
        return a is b
    return len(a) == len(b) and starts_with_ignore_case(a, b)


def ordinal_sort_key(name: Optional[str]) -> str:
    """Cle de tri ordinale : comparaison par point de code, jamais par locale."""
    return name or ""


def file_stem(path: str) -> str:
    """Nom du fichier sans extension ("" pour un chemin vide)."""
    if not path:
        return ""
    return PurePath(path).stem


def parent_folder_name(path: str) -> str:
    """Nom du repertoire contenant le chemin ("" si aucun)."""
    if not path:
        return ""
    return PurePath(path).parent.name
