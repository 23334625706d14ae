"""
Ports (interfaces abstraites) de l'architecture hexagonale.

Exports:
- IPodcastRepository: consultation du catalogue normalisé
- IPodcastDataSource, RawCatalog, DataSourceError: chargement du catalogue brut
"""

from podgallery.core.ports.data_source import DataSourceError, IPodcastDataSource, RawCatalog
from podgallery.core.ports.repositories import IPodcastRepository

__all__ = [
    "DataSourceError",
    "IPodcastDataSource",
    "IPodcastRepository",
    "RawCatalog",
]
