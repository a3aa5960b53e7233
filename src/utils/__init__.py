"""
Utilitaires et constantes pour CineGroup.

Ce module contient les constantes de nommage et les fonctions pures
de manipulation des noms.
"""

from src.utils.constants import (
    IMAGE_EXTENSIONS,
    STUB_EXTENSIONS,
    VIDEO_EXTENSIONS,
)
from src.utils.naming import (
    equals_ignore_case,
    ordinal_sort_key,
    same_year,
    starts_with_ignore_case,
    strip_version_suffix,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "STUB_EXTENSIONS",
    "IMAGE_EXTENSIONS",
    "strip_version_suffix",
    "same_year",
    "starts_with_ignore_case",
    "equals_ignore_case",
    "ordinal_sort_key",
]
