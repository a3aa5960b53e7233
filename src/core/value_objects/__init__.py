"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- FileSystemEntry : Entree d'un repertoire (chemin, nom, repertoire ou non)
- StackedGroup : Pile de fichiers multi-parties
- NamingOptions : Conventions de nommage (extensions, regles, expressions)
- ExtraRule, ExtraRuleType, StackingRule, StackPart : Regles de nommage
- ExtraType : Type de bonus
- EpisodeName : Resultat du parsing d'un nom d'episode
- VideoType, IsoType, MediaKind, CollectionType : Nature des medias
"""

from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.media_kind import (
    CollectionType,
    IsoType,
    MediaKind,
    VideoType,
)
from src.core.value_objects.naming_options import (
    ExtraRule,
    ExtraRuleType,
    NamingOptions,
    StackingRule,
    StackPart,
)
from src.core.value_objects.parsed_info import EpisodeName, ExtraType
from src.core.value_objects.stack import StackedGroup

__all__ = [
    "FileSystemEntry",
    "StackedGroup",
    "NamingOptions",
    "ExtraRule",
    "ExtraRuleType",
    "StackingRule",
    "StackPart",
    "ExtraType",
    "EpisodeName",
    "VideoType",
    "IsoType",
    "MediaKind",
    "CollectionType",
]
