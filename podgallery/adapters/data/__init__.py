"""Sources de données du catalogue (embarqué, fichier JSON)."""

from podgallery.adapters.data.sources import JsonFileDataSource, StaticDataSource, data_source_for

__all__ = [
    "JsonFileDataSource",
    "StaticDataSource",
    "data_source_for",
]
