"""
Chargement du catalogue dans le repository.

Lit le catalogue brut depuis une source de données, le normalise et
construit (ou recharge) le repository en mémoire.
"""

from loguru import logger

from podgallery.core.ports.data_source import IPodcastDataSource
from podgallery.infrastructure.memory.podcast_repository import InMemoryPodcastRepository
from podgallery.services.normalizer import (
    build_genre_lookup,
    build_season_lookup,
    normalize_with_lookups,
)


class CatalogService:
    """
    Service de chargement du catalogue.

    Attributs:
        data_source: Source du catalogue brut
    """

    def __init__(self, data_source: IPodcastDataSource) -> None:
        self.data_source = data_source

    def _load(self):
        raw = self.data_source.load()
        season_lookup = build_season_lookup(raw.seasons)
        records = normalize_with_lookups(
            raw.podcasts, build_genre_lookup(raw.genres), season_lookup
        )
        skipped = len(raw.podcasts) - len(records)
        logger.info(
            f"Catalogue chargé : {len(records)} podcasts, {len(raw.genres)} genres"
            + (f", {skipped} ignoré(s)" if skipped else "")
        )
        return records, season_lookup

    def build_repository(self) -> InMemoryPodcastRepository:
        """Charge et normalise le catalogue dans un nouveau repository."""
        records, season_lookup = self._load()
        return InMemoryPodcastRepository(records, season_lookup)

    def reload(self, repository: InMemoryPodcastRepository) -> int:
        """
        Recharge le catalogue dans un repository existant.

        Returns:
            Nombre de podcasts chargés
        """
        records, season_lookup = self._load()
        repository.reload(records, season_lookup)
        return len(records)
