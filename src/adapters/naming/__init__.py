"""
Adaptateurs de nommage pour CineGroup.

Ce package contient les implementations concretes des ports de nommage:
- RegexStackResolver: Empilement des parties (cd1/cd2, disc A/B)
- RegexNoiseCleaner: Retrait des jetons de qualite et de source
- DiscDetector: Reconnaissance des structures DVD et Blu-ray
- ExtensionPhotoDetector: Reconnaissance des photos d'accompagnement
"""

from src.adapters.naming.disc_detector import DiscDetector
from src.adapters.naming.noise_cleaner import RegexNoiseCleaner
from src.adapters.naming.photo_detector import ExtensionPhotoDetector
from src.adapters.naming.stack_resolver import RegexStackResolver

__all__ = [
    "DiscDetector",
    "ExtensionPhotoDetector",
    "RegexNoiseCleaner",
    "RegexStackResolver",
]
