"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats de lecture du catalogue
de podcasts. L'implémentation fournie travaille en mémoire, à partir des
enregistrements produits par le normalizer.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from podgallery.core.entities.podcast import DisplayRecord, SeasonDetail
from podgallery.core.value_objects.query import ALL_GENRES, SortMode


class IPodcastRepository(ABC):
    """
    Interface de consultation du catalogue de podcasts.

    Les requêtes ne modifient jamais les enregistrements : elles retournent
    de nouvelles listes ordonnées.
    """

    @abstractmethod
    def list_genre_facets(self) -> list[str]:
        """Liste la sentinelle ALL_GENRES suivie des genres distincts."""
        ...

    @abstractmethod
    def query(
        self,
        genre: Optional[str] = ALL_GENRES,
        sort: Union[SortMode, str, None] = SortMode.RECENT,
    ) -> list[DisplayRecord]:
        """
        Filtre par genre puis trie les podcasts.

        Args :
            genre : Nom exact du genre, ou ALL_GENRES pour tout conserver
            sort : Mode de tri ; toute valeur inconnue trie par date de mise à jour

        Retourne :
            Nouvelle liste de podcasts
        """
        ...

    @abstractmethod
    def by_id(self, podcast_id: Union[str, int]) -> Optional[DisplayRecord]:
        """Récupère un podcast par son ID, None si inconnu."""
        ...

    @abstractmethod
    def season_details(self, podcast_id: Union[str, int]) -> tuple[SeasonDetail, ...]:
        """Récupère les saisons d'un podcast (tuple vide si inconnu)."""
        ...
