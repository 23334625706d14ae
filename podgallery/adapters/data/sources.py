"""
Sources de données du catalogue brut.

- StaticDataSource : catalogue embarqué (ou collections fournies)
- JsonFileDataSource : fichier JSON {"podcasts": [...], "genres": [...], "seasons": [...]}
"""

import copy
import json
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from podgallery.core.ports.data_source import DataSourceError, IPodcastDataSource, RawCatalog

from . import sample

_COLLECTIONS = ("podcasts", "genres", "seasons")


class StaticDataSource(IPodcastDataSource):
    """Source en mémoire ; par défaut, le catalogue de démonstration."""

    def __init__(
        self,
        podcasts: Optional[list[dict[str, Any]]] = None,
        genres: Optional[list[dict[str, Any]]] = None,
        seasons: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        self._podcasts = sample.PODCASTS if podcasts is None else podcasts
        self._genres = sample.GENRES if genres is None else genres
        self._seasons = sample.SEASONS if seasons is None else seasons

    def load(self) -> RawCatalog:
        # Copie profonde : le catalogue embarqué reste intact
        return RawCatalog(
            podcasts=copy.deepcopy(self._podcasts),
            genres=copy.deepcopy(self._genres),
            seasons=copy.deepcopy(self._seasons),
        )


class JsonFileDataSource(IPodcastDataSource):
    """
    Source lisant un fichier JSON.

    Les trois clés sont optionnelles, mais chacune doit être une liste
    d'objets si elle est présente.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> RawCatalog:
        if not self.path.is_file():
            raise DataSourceError(f"Fichier de données introuvable : {self.path}")
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DataSourceError(f"Fichier de données illisible : {self.path} ({exc})") from exc

        if not isinstance(payload, dict):
            raise DataSourceError(f"Objet JSON attendu à la racine de {self.path}")

        collections = {}
        for key in _COLLECTIONS:
            value = payload.get(key) or []
            if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
                raise DataSourceError(f"'{key}' doit être une liste d'objets dans {self.path}")
            collections[key] = value

        logger.debug(f"Catalogue lu depuis {self.path}")
        return RawCatalog(**collections)


def data_source_for(data_file: Optional[Path]) -> IPodcastDataSource:
    """Sélectionne la source : fichier JSON si configuré, sinon catalogue embarqué."""
    if data_file is not None:
        return JsonFileDataSource(data_file)
    return StaticDataSource()
