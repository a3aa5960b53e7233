"""
Objet valeur representant une pile de fichiers.

Une pile regroupe les parties d'un meme contenu (CD1/CD2, part1/part2,
disc A/disc B). Elle est produite par le port IStackResolver.
"""

from dataclasses import dataclass

from src.utils.naming import equals_ignore_case


@dataclass(frozen=True)
class StackedGroup:
    """
    Groupe de fichiers (ou de repertoires) formant les parties d'un contenu.

    Attributs:
        name: Nom commun de la pile (prefixe partage par les parties)
        files: Chemins des parties, dans l'ordre des parties
        is_directory_stack: True si les parties sont des repertoires
    """

    name: str
    files: tuple[str, ...] = ()
    is_directory_stack: bool = False

    def contains(self, path: str, is_directory: bool) -> bool:
        """
        Verifie si un chemin fait partie de la pile.

        Un fichier n'appartient jamais a une pile de repertoires (et inversement).
        La comparaison des chemins ignore la casse.
        """
        if self.is_directory_stack != is_directory:
            return False
        return any(equals_ignore_case(member, path) for member in self.files)
