"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINEGROUP_,
et peut optionnellement être fournie via un fichier .env.

Les conventions de nommage par défaut peuvent être complétées (extensions vidéo,
expressions de nettoyage) sans jamais être remplacées.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.value_objects.naming_options import NamingOptions

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINEGROUP_.
    Exemple : CINEGROUP_LOG_LEVEL=DEBUG

    Les listes se fournissent en JSON :
    CINEGROUP_EXTRA_VIDEO_EXTENSIONS='[".m2ts", ".mts"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEGROUP_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Regroupement
    support_multi_version: bool = Field(default=True)
    parse_names: bool = Field(default=True)
    enable_photos: bool = Field(default=False)

    # Conventions de nommage (ajoutées aux valeurs par défaut)
    extra_video_extensions: list[str] = Field(default_factory=list)
    extra_clean_string_patterns: list[str] = Field(default_factory=list)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinegroup.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Normalise le niveau de log en majuscules (debug -> DEBUG)."""
        return v.upper()

    def naming_options(self) -> NamingOptions:
        """Construit les conventions de nommage à partir de la configuration.

        Raises:
            NamingConfigurationError: si une expression configurée est invalide.
        """
        return NamingOptions.build(
            extra_video_extensions=self.extra_video_extensions,
            extra_clean_string_patterns=self.extra_clean_string_patterns,
        )
