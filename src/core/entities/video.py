"""
Entites video.

Entites representant les fichiers candidats, les unites video logiques
produites par le regroupement, et les elements assembles a l'echelle d'un
dossier (films, DVD, Blu-ray, multi-disques).
"""

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Optional

from src.core.value_objects.file_entry import FileSystemEntry
from src.core.value_objects.media_kind import IsoType, MediaKind, VideoType
from src.core.value_objects.parsed_info import ExtraType


@dataclass(frozen=True)
class VideoCandidate:
    """
    Entree du systeme de fichiers consideree comme contenu video.

    Construit une seule fois par le parser video (IVideoParser), puis immutable.

    Attributs:
        path: Chemin complet du fichier ou du repertoire
        is_directory: True pour un repertoire (structure de disque, pile de dossiers)
        name: Nom d'affichage (nettoye ou nom de fichier brut selon le parsing)
        year: Annee de production extraite du nom
        extra_type: Type de bonus, None pour un media principal
        container: Extension sans le point (ex: "mkv"), None pour un repertoire
        is_3d: True si le nom indique un contenu 3D
        format_3d: Format 3D detecte (ex: "hsbs"), si connu
        is_stub: True pour un fichier stub (.disc)
        stub_type: Type de support du stub (ex: "bluray")
    """

    path: str
    is_directory: bool = False
    name: str = ""
    year: Optional[int] = None
    extra_type: Optional[ExtraType] = None
    container: Optional[str] = None
    is_3d: bool = False
    format_3d: Optional[str] = None
    is_stub: bool = False
    stub_type: Optional[str] = None

    @property
    def file_name(self) -> str:
        """Nom du fichier avec son extension."""
        return PurePath(self.path).name if self.path else ""

    @property
    def is_extra(self) -> bool:
        """True si le fichier est un bonus."""
        return self.extra_type is not None


@dataclass
class VideoUnit:
    """
    Unite video logique : un film ou un episode, eventuellement en plusieurs fichiers.

    Invariants:
        - files n'est jamais vide
        - une unite bonus (extra_type renseigne) n'a jamais de versions alternatives

    Attributs:
        name: Nom d'affichage (reecrit une fois lors de la fusion multi-version)
        year: Annee de production
        extra_type: Type de bonus herite du fichier principal
        files: Fichiers principaux (plusieurs pour un contenu empile CD1/CD2)
        alternate_versions: Autres fichiers du meme contenu (autre qualite/source)
    """

    name: str
    files: list[VideoCandidate]
    year: Optional[int] = None
    extra_type: Optional[ExtraType] = None
    alternate_versions: list[VideoCandidate] = field(default_factory=list)

    @property
    def primary(self) -> VideoCandidate:
        """Premier fichier principal."""
        return self.files[0]

    def all_paths(self) -> list[str]:
        """Chemins des fichiers principaux puis des versions alternatives."""
        return [f.path for f in self.files] + [f.path for f in self.alternate_versions]


@dataclass(frozen=True)
class DiscFolderInfo:
    """
    Repertoire reconnu comme structure de disque.

    Attributs:
        path: Chemin du repertoire
        video_type: VideoType.DVD ou VideoType.BLU_RAY
        index: Position du disque dans un ensemble multi-disques trie
    """

    path: str
    video_type: VideoType
    index: int = 0


@dataclass
class MovieItem:
    """
    Element assemble a l'echelle d'un dossier, remis a l'hote.

    Attributs:
        path: Chemin du fichier principal (ou du dossier pour un disque)
        name: Nom d'affichage
        kind: Type d'element (film, clip musical, video, episode)
        year: Annee de production
        video_type: Forme physique (fichier, DVD, Blu-ray, ISO)
        iso_type: Contenu d'une image ISO, si determine
        additional_parts: Chemins des parties suivantes (CD2, disque 2...)
        alternate_versions: Chemins des versions alternatives
        is_in_mixed_folder: True si le dossier contient d'autres medias
        is_placeholder: True pour un stub (.disc) remplacant un support physique
        is_3d: True pour un contenu 3D
        format_3d: Format 3D, si connu
        container: Extension du fichier principal (ex: "mkv"), None pour un disque
    """

    path: str
    name: str = ""
    kind: MediaKind = MediaKind.MOVIE
    year: Optional[int] = None
    video_type: VideoType = VideoType.VIDEO_FILE
    iso_type: Optional[IsoType] = None
    additional_parts: list[str] = field(default_factory=list)
    alternate_versions: list[str] = field(default_factory=list)
    is_in_mixed_folder: bool = False
    is_placeholder: bool = False
    is_3d: bool = False
    format_3d: Optional[str] = None
    container: Optional[str] = None

    @property
    def containing_folder_path(self) -> str:
        """Dossier de l'element : le chemin lui-meme pour un disque, sinon son parent.

        Un stub (.disc) de type DVD ou Blu-ray reste un fichier : son dossier
        est son parent.
        """
        if self.video_type in (VideoType.DVD, VideoType.BLU_RAY) and not self.is_placeholder:
            return self.path
        return str(PurePath(self.path).parent)


@dataclass
class MovieAssemblyResult:
    """
    Resultat de l'assemblage d'un dossier.

    Attributs:
        items: Elements principaux resolus
        extra_files: Entrees laissees a l'hote (bonus, sous-dossiers, fichiers non video)
    """

    items: list[MovieItem] = field(default_factory=list)
    extra_files: list[FileSystemEntry] = field(default_factory=list)


@dataclass(frozen=True)
class FolderContext:
    """
    Contexte du dossier parent fourni par l'hote.

    Attributs:
        path: Chemin du dossier
        is_root: True pour la racine de l'arborescence de l'hote
        is_top_parent: True pour le dossier racine d'une bibliotheque
        is_series: True si le dossier (ou un ancetre) est une serie TV
    """

    path: str
    is_root: bool = False
    is_top_parent: bool = False
    is_series: bool = False
