"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe PODGALLERY_,
et peut optionnellement être fournie via un fichier .env.

Le fichier de données est optionnel : sans lui, le catalogue embarqué est utilisé.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from podgallery.core.value_objects.query import ALL_GENRES, SortMode

# Trouver le fichier .env à la racine du projet (parent de podgallery/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe PODGALLERY_.
    Exemple : PODGALLERY_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="PODGALLERY_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Catalogue (OPTIONNEL - catalogue embarqué si non défini)
    data_file: Optional[Path] = Field(default=None)

    # État initial de la galerie
    default_genre: str = Field(default=ALL_GENRES)
    default_sort: str = Field(default=SortMode.RECENT.value)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/podgallery.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("data_file", mode="before")
    @classmethod
    def expand_optional_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Comme expand_path, une valeur vide désactive le fichier de données."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("default_sort")
    @classmethod
    def normalize_sort(cls, v: str) -> str:
        """Ramène un tri inconnu sur le tri par date."""
        return SortMode.parse(v).value

    @property
    def sort_mode(self) -> SortMode:
        return SortMode(self.default_sort)
