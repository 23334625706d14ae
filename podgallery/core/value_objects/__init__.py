"""
Objets valeur immutables du domaine.

Exports:
- ALL_GENRES: sentinelle du filtre par genre
- SortMode: mode de tri de la galerie
"""

from podgallery.core.value_objects.query import ALL_GENRES, SortMode

__all__ = [
    "ALL_GENRES",
    "SortMode",
]
