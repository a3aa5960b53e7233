"""
Adaptateurs de parsing pour CineGroup.

Ce package contient les implementations concretes des interfaces de parsing:
- GuessitVideoParser: Analyse un chemin video (nom, annee, bonus, 3D, stub)
- GuessitEpisodeParser: Reconnait les noms d'episodes avec guessit
"""

from src.adapters.parsing.episode_parser import GuessitEpisodeParser
from src.adapters.parsing.guessit_parser import GuessitVideoParser

__all__ = [
    "GuessitEpisodeParser",
    "GuessitVideoParser",
]
