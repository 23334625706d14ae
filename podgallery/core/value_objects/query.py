"""
Objets valeur pour les requêtes de la galerie.

Définit le mode de tri et la valeur sentinelle du filtre par genre.
"""

from enum import Enum
from typing import Optional, Union

# Valeur sentinelle du filtre : conserve tous les podcasts
ALL_GENRES = "All Genres"


class SortMode(Enum):
    """Mode de tri de la galerie.

    Valeurs:
        RECENT: Mise à jour la plus récente en premier
        NEWEST: Alias de RECENT (même clé de tri)
        POPULAR: Rang de popularité décroissant
    """

    RECENT = "recent"
    NEWEST = "newest"
    POPULAR = "popular"

    @classmethod
    def parse(cls, value: Optional[Union["SortMode", str]]) -> "SortMode":
        """
        Convertit une valeur libre en SortMode sans jamais lever d'exception.

        Toute valeur non reconnue retombe sur RECENT.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.RECENT
        try:
            return cls(str(value))
        except ValueError:
            return cls.RECENT

    @property
    def label(self) -> str:
        """Libellé affiché dans le sélecteur de tri."""
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortMode.RECENT: "Recently updated",
    SortMode.NEWEST: "Newest",
    SortMode.POPULAR: "Most popular",
}
