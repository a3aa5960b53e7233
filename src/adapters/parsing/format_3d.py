"""
Detection du format 3D dans les noms de fichiers.

Un nom est 3D lorsqu'un jeton de format suit le jeton "3d"
(ex: "Film.3D.HSBS.mkv"), ou lorsque le jeton de format contient
lui-meme "3d" (ex: "Film.SBS3D.mkv").
"""

import re
from collections.abc import Sequence
from pathlib import PurePath
from typing import Optional


def detect_format_3d(
    path: str,
    precondition: str,
    tokens: Sequence[str],
    delimiters: str,
) -> tuple[bool, Optional[str]]:
    """
    Detecte le format 3D d'un chemin.

    Args:
        path: Chemin complet du fichier ou du repertoire
        precondition: Jeton annoncant un contenu 3D ("3d")
        tokens: Jetons de format reconnus
        delimiters: Caracteres separant les jetons du nom

    Returns:
        (is_3d, format_3d) ; (False, None) si le nom n'est pas 3D.
    """
    name_tokens = [
        token.lower()
        for token in re.split(f"[{re.escape(delimiters)}]", PurePath(path).name)
        if token
    ]
    formats = {token.lower() for token in tokens}
    precondition = precondition.lower()

    found_precondition = False
    for token in name_tokens:
        if token == precondition:
            found_precondition = True
            continue
        if token in formats and (found_precondition or precondition in token):
            return True, token

    return False, None
