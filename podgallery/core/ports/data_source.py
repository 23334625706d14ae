"""
Interface port pour les sources de données brutes du catalogue.

Une source fournit les trois collections brutes (podcasts, genres, saisons)
telles que publiées par le fournisseur de données, avant normalisation.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class DataSourceError(RuntimeError):
    """Source de données introuvable ou mal formée."""


@dataclass(frozen=True)
class RawCatalog:
    """
    Collections brutes du catalogue.

    Attributs:
        podcasts: Podcasts bruts {id, title, description?, genres, seasons?, updated}
        genres: Genres bruts {id, title}
        seasons: Saisons brutes {id, seasonDetails: [{title, episodes}]}
    """

    podcasts: list[dict[str, Any]] = field(default_factory=list)
    genres: list[dict[str, Any]] = field(default_factory=list)
    seasons: list[dict[str, Any]] = field(default_factory=list)


class IPodcastDataSource(ABC):
    """Interface de chargement du catalogue brut."""

    @abstractmethod
    def load(self) -> RawCatalog:
        """Charge les collections brutes. Lève DataSourceError en cas d'échec."""
        ...
