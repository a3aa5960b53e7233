"""
Constantes globales pour CineGroup.

Ce module contient les valeurs par defaut des conventions de nommage:
- Extensions video, stub et image reconnues
- Expressions de nettoyage des noms (jetons de qualite, de source, annees)
- Regles d'empilement (CD1/CD2, part1/part2, disc A/B...)
- Regles de detection des bonus (trailers, making-of, scenes coupees...)
- Regles de detection du format 3D
- Signatures des structures de disque DVD et Blu-ray
"""

# Extensions video reconnues
VIDEO_EXTENSIONS = frozenset({
    ".m4v",
    ".3gp",
    ".nsv",
    ".ts",
    ".ty",
    ".strm",
    ".rm",
    ".rmvb",
    ".ifo",
    ".mov",
    ".qt",
    ".divx",
    ".xvid",
    ".bivx",
    ".vob",
    ".nrg",
    ".img",
    ".iso",
    ".pva",
    ".wmv",
    ".asf",
    ".asx",
    ".ogm",
    ".m2v",
    ".avi",
    ".bin",
    ".dvr-ms",
    ".mpg",
    ".mpeg",
    ".mp4",
    ".mkv",
    ".avc",
    ".vp3",
    ".svq3",
    ".nuv",
    ".viv",
    ".dv",
    ".fli",
    ".flv",
    ".001",
    ".tp",
    ".webm",
})

# Fichiers "stub" representant un disque physique range ailleurs
STUB_EXTENSIONS = frozenset({".disc"})

# Types de stub reconnus dans le nom (ex: "Film.dvd.disc")
STUB_TYPES = {
    "dvd": "dvd",
    "hddvd": "hddvd",
    "bluray": "bluray",
    "brrip": "bluray",
    "bd25": "bluray",
    "bd50": "bluray",
    "vhs": "vhs",
    "tv": "tv",
    "hdtv": "tv",
}

# Extensions d'images (photos d'accompagnement)
IMAGE_EXTENSIONS = frozenset({
    ".png",
    ".jpg",
    ".jpeg",
    ".webp",
    ".tbn",
    ".gif",
    ".bmp",
    ".tiff",
    ".heic",
})

# Noms d'images d'illustration qui ne sont jamais des photos personnelles
ARTWORK_IMAGE_NAMES = frozenset({
    "folder",
    "thumb",
    "landscape",
    "fanart",
    "backdrop",
    "poster",
    "cover",
    "logo",
    "default",
})

# Jetons de bruit (qualite, source, codec, langue) : le groupe "cleaned"
# conserve tout ce qui precede le premier jeton reconnu
CLEAN_STRING_PATTERNS = (
    r"^\s*(?P<cleaned>.+?)[ _\,\.\(\)\[\]\-](3d|sbs|tab|hsbs|htab|mvc|HDR|HDC|UHD"
    r"|UltraHD|4k|ac3|dts|custom|dc|divx|divx5|dsr|dsrip|dutch|dvd|dvdrip|dvdscr"
    r"|dvdscreener|screener|dvdivx|cam|fragment|fs|hdtv|hdrip|hdtvrip|internal"
    r"|limited|multisubs|ntsc|ogg|ogm|pal|pdtv|proper|repack|rerip|retail|cd[1-9]"
    r"|r3|r5|bd5|bd|se|svcd|swedish|german|read\.nfo|nfofix|unrated|ws|telesync"
    r"|ts|telecine|tc|brrip|bdrip|480p|480i|576p|576i|720p|720i|1080p|1080i|2160p"
    r"|hrhd|hrhdtv|hddvd|bluray|blu-ray|x264|x265|h264|h265|xvid|xvidvd|xxx"
    r"|www\.www|AAC|DTS|\[.*\])([ _\,\.\(\)\[\]\-]|$)",
    r"^(?P<cleaned>.+?)(\[.*\])",
    r"^\s*(?P<cleaned>.+?)\WE[0-9]+(-|~)E?[0-9]+(\W|$)",
    r"^\s*\[[^\]]+\](?!\.\w+$)\s*(?P<cleaned>.+)",
    r"^\s*(?P<cleaned>.+?)\s+-\s+[0-9]+\s*$",
    r"^\s*(?P<cleaned>.+?)(([-._ ](trailer|sample))|-(scene|clip|behindthescenes"
    r"|deleted|deletedscene|featurette|short|interview|other|extra))$",
)

# Extraction de l'annee : "Titre (2010)", "Titre.2010.1080p", "Titre [2010]"
CLEAN_DATE_TIME_PATTERNS = (
    r"(?P<title>.+[^_\,\.\(\)\[\]\-])[_\.\(\)\[\]\-](?P<year>(?:19|20)[0-9]{2})"
    r"(?![0-9]+|\W[0-9]{2}\W[0-9]{2})(?:[ _\,\.\(\)\[\]\-][^0-9]|).*"
    r"(?:(?:19|20)[0-9]{2})*",
    r"(?P<title>.+[^_\,\.\(\)\[\]\-])[ _\.\(\)\[\]\-]+(?P<year>(?:19|20)[0-9]{2})"
    r"(?![0-9]+|\W[0-9]{2}\W[0-9]{2})(?:[ _\,\.\(\)\[\]\-][^0-9]|).*"
    r"(?:(?:19|20)[0-9]{2})*",
)

# Regles d'empilement : (expression, numerotation numerique ?)
VIDEO_FILE_STACKING_RULES = (
    (
        r"^(?P<filename>.*?)(?:(?<=[\]\)\}])|[ _.-]+)[\(\[]?"
        r"(?P<parttype>cd|dvd|part|pt|dis[ck])[ _.-]*(?P<number>[0-9]+)[\)\]]?"
        r"(?:\.[^.]+)?$",
        True,
    ),
    (
        r"^(?P<filename>.*?)(?:(?<=[\]\)\}])|[ _.-]+)[\(\[]?"
        r"(?P<parttype>cd|dvd|part|pt|dis[ck])[ _.-]*(?P<number>[a-d])[\)\]]?"
        r"(?:\.[^.]+)?$",
        False,
    ),
)

# Regles de bonus : (type de regle, jeton, type de bonus)
EXTRA_RULES = (
    ("filename", "trailer", "trailer"),
    ("suffix", "-trailer", "trailer"),
    ("suffix", ".trailer", "trailer"),
    ("suffix", "_trailer", "trailer"),
    ("suffix", " trailer", "trailer"),
    ("filename", "sample", "sample"),
    ("suffix", "-sample", "sample"),
    ("suffix", ".sample", "sample"),
    ("suffix", "_sample", "sample"),
    ("suffix", " sample", "sample"),
    ("filename", "theme", "theme_song"),
    ("directory_name", "backdrops", "theme_video"),
    ("directory_name", "theme-music", "theme_song"),
    ("directory_name", "extras", "unknown"),
    ("directory_name", "others", "unknown"),
    ("directory_name", "behind the scenes", "behind_the_scenes"),
    ("directory_name", "deleted scenes", "deleted_scene"),
    ("directory_name", "interviews", "interview"),
    ("directory_name", "scenes", "scene"),
    ("directory_name", "samples", "sample"),
    ("directory_name", "shorts", "short"),
    ("directory_name", "featurettes", "featurette"),
    ("directory_name", "clips", "clip"),
    ("directory_name", "trailers", "trailer"),
    ("suffix", "-behindthescenes", "behind_the_scenes"),
    ("suffix", "-deleted", "deleted_scene"),
    ("suffix", "-deletedscene", "deleted_scene"),
    ("suffix", "-featurette", "featurette"),
    ("suffix", "-short", "short"),
    ("suffix", "-interview", "interview"),
    ("suffix", "-scene", "scene"),
    ("suffix", "-clip", "clip"),
    ("suffix", "-other", "unknown"),
    ("suffix", "-extra", "unknown"),
)

# Format 3D : jeton obligatoire puis jetons de format
FORMAT_3D_PRECONDITION = "3d"
FORMAT_3D_TOKENS = ("fsbs", "hsbs", "sbs", "ftab", "htab", "tab", "sbs3d", "mvc")
FORMAT_3D_DELIMITERS = " ._-[]()"

# Signatures de disque
DVD_DIRECTORY_NAME = "video_ts"
DVD_FILE_NAME = "video_ts.ifo"
DVD_CONTENT_EXTENSION = ".vob"
BLURAY_DIRECTORY_NAME = "bdmv"

# Fichiers d'echantillon ignores lors de la resolution d'un dossier
SAMPLE_IGNORE_PATTERN = r"\bsample\b"

# Fichiers indiquant un dossier de serie (sans type de collection)
SERIES_MARKER_FILES = frozenset({"tvshow.nfo", "season.nfo"})
