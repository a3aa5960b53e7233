"""
Nettoyage des jetons de bruit dans les noms de fichiers.

Les expressions de nettoyage definissent un groupe nomme "cleaned" qui
conserve la partie utile du nom, avant le premier jeton de qualite,
de source ou de release reconnu.
"""

import re
from collections.abc import Sequence
from typing import Optional

from src.core.ports.parser import INoiseCleaner


class RegexNoiseCleaner(INoiseCleaner):
    """Nettoyeur applique les expressions dans l'ordre ; la premiere qui reconnait gagne."""

    def clean(self, text: str, patterns: Sequence[re.Pattern[str]]) -> Optional[str]:
        if not text:
            return None

        for pattern in patterns:
            match = pattern.search(text)
            if match is None:
                continue
            cleaned = match.groupdict().get("cleaned")
            if cleaned:
                return cleaned

        return None
