"""
Objet valeur regroupant les conventions de nommage.

NamingOptions est transmis tel quel aux ports (empilement, parsing, nettoyage).
Les expressions regulieres sont compilees une seule fois a la construction ;
une expression invalide leve NamingConfigurationError.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.exceptions import NamingConfigurationError
from src.core.value_objects.parsed_info import ExtraType
from src.utils import constants


class ExtraRuleType(str, Enum):
    """Maniere dont une regle de bonus est evaluee."""

    SUFFIX = "suffix"
    FILENAME = "filename"
    DIRECTORY_NAME = "directory_name"
    REGEX = "regex"


@dataclass(frozen=True)
class ExtraRule:
    """
    Regle de detection d'un bonus.

    Attributs:
        rule_type: Mode d'evaluation (suffixe, nom exact, dossier, regex)
        token: Jeton compare (ou expression pour REGEX)
        extra_type: Type de bonus attribue en cas de correspondance
    """

    rule_type: ExtraRuleType
    token: str
    extra_type: ExtraType


@dataclass(frozen=True)
class StackPart:
    """Decoupage d'un nom de partie : nom de pile, type et numero de partie."""

    stack_name: str
    part_type: str
    part_number: str


@dataclass(frozen=True)
class StackingRule:
    """Expression d'empilement et nature de la numerotation (chiffres ou lettres)."""

    pattern: re.Pattern[str]
    is_numerical: bool

    def match(self, name: str) -> Optional[StackPart]:
        """Decoupe un nom de fichier en parties, ou None si la regle ne s'applique pas."""
        match = self.pattern.match(name)
        if match is None:
            return None
        return StackPart(
            stack_name=match.group("filename"),
            part_type=match.group("parttype"),
            part_number=match.group("number"),
        )


@dataclass(frozen=True)
class NamingOptions:
    """
    Conventions de nommage utilisees pour le regroupement.

    Utiliser NamingOptions.build() pour obtenir les valeurs par defaut,
    eventuellement completees par la configuration.
    """

    video_file_extensions: frozenset[str]
    stub_file_extensions: frozenset[str]
    stub_types: tuple[tuple[str, str], ...]
    image_file_extensions: frozenset[str]
    artwork_image_names: frozenset[str]
    clean_string_patterns: tuple[re.Pattern[str], ...]
    clean_date_time_patterns: tuple[re.Pattern[str], ...]
    stacking_rules: tuple[StackingRule, ...]
    extra_rules: tuple[ExtraRule, ...]
    format_3d_precondition: str
    format_3d_tokens: tuple[str, ...]
    format_3d_delimiters: str
    dvd_directory_name: str
    dvd_file_name: str
    dvd_content_extension: str
    bluray_directory_name: str
    sample_ignore_pattern: re.Pattern[str]
    series_marker_files: frozenset[str]

    @classmethod
    def build(
        cls,
        extra_video_extensions: Iterable[str] = (),
        extra_clean_string_patterns: Iterable[str] = (),
    ) -> "NamingOptions":
        """
        Construit les options par defaut, completees par la configuration.

        Args:
            extra_video_extensions: Extensions video supplementaires (".ext" ou "ext")
            extra_clean_string_patterns: Expressions de nettoyage ajoutees apres
                celles par defaut (doivent definir un groupe nomme "cleaned")

        Returns:
            NamingOptions pret a l'emploi.

        Raises:
            NamingConfigurationError: si une expression ne compile pas.
        """
        video_extensions = set(constants.VIDEO_EXTENSIONS)
        for extension in extra_video_extensions:
            extension = extension.strip().lower()
            if extension:
                video_extensions.add(extension if extension.startswith(".") else f".{extension}")

        clean_strings = [
            _compile("clean_string_patterns", pattern, re.IGNORECASE)
            for pattern in (*constants.CLEAN_STRING_PATTERNS, *extra_clean_string_patterns)
        ]
        for pattern in clean_strings:
            if "cleaned" not in pattern.groupindex:
                raise NamingConfigurationError(
                    "clean_string_patterns", pattern.pattern, "groupe 'cleaned' manquant"
                )

        return cls(
            video_file_extensions=frozenset(video_extensions),
            stub_file_extensions=constants.STUB_EXTENSIONS,
            stub_types=tuple(constants.STUB_TYPES.items()),
            image_file_extensions=constants.IMAGE_EXTENSIONS,
            artwork_image_names=constants.ARTWORK_IMAGE_NAMES,
            clean_string_patterns=tuple(clean_strings),
            clean_date_time_patterns=tuple(
                _compile("clean_date_time_patterns", pattern, re.IGNORECASE)
                for pattern in constants.CLEAN_DATE_TIME_PATTERNS
            ),
            stacking_rules=tuple(
                StackingRule(_compile("stacking_rules", pattern, re.IGNORECASE), is_numerical)
                for pattern, is_numerical in constants.VIDEO_FILE_STACKING_RULES
            ),
            extra_rules=tuple(
                ExtraRule(ExtraRuleType(rule_type), token, ExtraType(extra_type))
                for rule_type, token, extra_type in constants.EXTRA_RULES
            ),
            format_3d_precondition=constants.FORMAT_3D_PRECONDITION,
            format_3d_tokens=constants.FORMAT_3D_TOKENS,
            format_3d_delimiters=constants.FORMAT_3D_DELIMITERS,
            dvd_directory_name=constants.DVD_DIRECTORY_NAME,
            dvd_file_name=constants.DVD_FILE_NAME,
            dvd_content_extension=constants.DVD_CONTENT_EXTENSION,
            bluray_directory_name=constants.BLURAY_DIRECTORY_NAME,
            sample_ignore_pattern=_compile(
                "sample_ignore_pattern", constants.SAMPLE_IGNORE_PATTERN, re.IGNORECASE
            ),
            series_marker_files=constants.SERIES_MARKER_FILES,
        )

    def is_video_extension(self, extension: str) -> bool:
        """Verifie si l'extension (avec le point) est une extension video."""
        return extension.lower() in self.video_file_extensions

    def is_stub_extension(self, extension: str) -> bool:
        """Verifie si l'extension (avec le point) est une extension de stub."""
        return extension.lower() in self.stub_file_extensions


def _compile(setting: str, pattern: str, flags: int = 0) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise NamingConfigurationError(setting, pattern, str(e)) from e
