"""
Reconnaissance des bonus (trailers, making-of, scenes coupees...).

Les regles sont evaluees dans l'ordre ; la premiere qui s'applique donne
le type de bonus.
"""

import re
from collections.abc import Sequence
from pathlib import PurePath
from typing import Optional

from src.core.value_objects.naming_options import ExtraRule, ExtraRuleType
from src.core.value_objects.parsed_info import ExtraType
from src.utils.naming import equals_ignore_case


def detect_extra_type(path: str, rules: Sequence[ExtraRule]) -> Optional[ExtraType]:
    """
    Determine le type de bonus d'un chemin.

    Args:
        path: Chemin complet du fichier
        rules: Regles de bonus

    Returns:
        Le type de bonus de la premiere regle applicable, ou None.
    """
    pure = PurePath(path)
    stem = pure.stem
    directory_name = pure.parent.name

    for rule in rules:
        if _matches(rule, stem, directory_name):
            return rule.extra_type
    return None


def _matches(rule: ExtraRule, stem: str, directory_name: str) -> bool:
    if rule.rule_type == ExtraRuleType.FILENAME:
        return equals_ignore_case(stem, rule.token)
    if rule.rule_type == ExtraRuleType.SUFFIX:
        return stem.lower().endswith(rule.token.lower())
    if rule.rule_type == ExtraRuleType.DIRECTORY_NAME:
        return equals_ignore_case(directory_name, rule.token)
    if rule.rule_type == ExtraRuleType.REGEX:
        return re.search(rule.token, stem, re.IGNORECASE) is not None
    return False
