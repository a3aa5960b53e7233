"""
CineGroup - Regroupement de fichiers vidéo en unités logiques.

Ce package reconnaît, dans un dossier, les films découpés en plusieurs
parties, les versions alternatives d'un même film, les bonus et les
structures de disque (DVD, Blu-ray, multi-disques).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (regroupement, assemblage)
- adapters/ : Couche infrastructure (CLI, parsing guessit, système de fichiers)
"""

__version__ = "0.1.0"
