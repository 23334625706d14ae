"""
Implémentation en mémoire du repository de podcasts.

Les enregistrements sont produits une fois par le normalizer et ne sont
jamais modifiés : chaque requête construit une nouvelle liste. Un
rechargement remplace les données en bloc.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from loguru import logger

from podgallery.core.entities.podcast import DisplayRecord, SeasonDetail
from podgallery.core.ports.repositories import IPodcastRepository
from podgallery.core.value_objects.query import ALL_GENRES, SortMode
from podgallery.utils.time_format import sort_timestamp


class InMemoryPodcastRepository(IPodcastRepository):
    """
    Repository de podcasts en mémoire.

    L'état (podcasts, index par ID, saisons) est un seul tuple immuable,
    remplacé en bloc par reload.
    """

    def __init__(
        self,
        records: Iterable[DisplayRecord] = (),
        season_lookup: Optional[Mapping[str, tuple[SeasonDetail, ...]]] = None,
    ) -> None:
        self._state = self._build_state(records, season_lookup)

    @staticmethod
    def _build_state(records, season_lookup):
        items = tuple(records)
        by_id: dict[str, DisplayRecord] = {}
        for record in items:
            by_id.setdefault(record.id, record)
        if len(by_id) != len(items):
            logger.warning(
                f"IDs dupliqués dans le catalogue : {len(items) - len(by_id)} doublon(s)"
            )
        seasons = MappingProxyType(
            {str(key): tuple(value) for key, value in (season_lookup or {}).items()}
        )
        return items, MappingProxyType(by_id), seasons

    def reload(
        self,
        records: Iterable[DisplayRecord],
        season_lookup: Optional[Mapping[str, tuple[SeasonDetail, ...]]] = None,
    ) -> None:
        """Remplace l'ensemble des données en une seule affectation."""
        self._state = self._build_state(records, season_lookup)
        logger.info(f"Catalogue rechargé : {len(self._state[0])} podcasts")

    def __len__(self) -> int:
        return len(self._state[0])

    def all(self) -> list[DisplayRecord]:
        """Retourne tous les podcasts dans l'ordre d'entrée."""
        return list(self._state[0])

    def list_genre_facets(self) -> list[str]:
        """Sentinelle ALL_GENRES puis genres distincts dans l'ordre de rencontre."""
        facets = [ALL_GENRES]
        seen = set()
        for record in self._state[0]:
            for genre in record.genres:
                if genre not in seen:
                    seen.add(genre)
                    facets.append(genre)
        return facets

    def query(
        self,
        genre: Optional[str] = ALL_GENRES,
        sort: Union[SortMode, str, None] = SortMode.RECENT,
    ) -> list[DisplayRecord]:
        """Filtre par genre exact puis trie (tri stable)."""
        items = self.all()
        if genre is not None and genre != ALL_GENRES:
            items = [record for record in items if genre in record.genres]

        mode = SortMode.parse(sort)
        if mode is SortMode.POPULAR:
            items.sort(key=lambda record: record.popularity, reverse=True)
        else:
            # recent et newest partagent la même clé
            items.sort(key=lambda record: sort_timestamp(record.updated_at), reverse=True)

        logger.debug(f"Requête genre={genre!r} sort={mode.value} : {len(items)} résultat(s)")
        return items

    def by_id(self, podcast_id: Union[str, int]) -> Optional[DisplayRecord]:
        return self._state[1].get(str(podcast_id))

    def season_details(self, podcast_id: Union[str, int]) -> tuple[SeasonDetail, ...]:
        return self._state[2].get(str(podcast_id), ())
