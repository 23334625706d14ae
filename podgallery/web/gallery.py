"""
Coordination de la galerie : repository -> aperçus -> détail.

Le GalleryService joue le rôle du conteneur de la grille : il crée un
aperçu par résultat de requête et reçoit, par propagation, les événements
de sélection émis par ces aperçus. Il ne lit jamais la structure interne
d'un aperçu, uniquement le détail de l'événement.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional, Union

from loguru import logger

from podgallery.core.entities.podcast import DisplayRecord, SeasonDetail
from podgallery.core.ports.repositories import IPodcastRepository
from podgallery.core.value_objects.query import ALL_GENRES, SortMode
from podgallery.utils.time_format import format_date

from .components.events import SELECT_EVENT, EventTarget, SelectionEvent
from .components.podcast_preview import PodcastPreview

DetailSink = Callable[["PodcastDetail"], None]


@dataclass(frozen=True)
class PodcastDetail:
    """
    Contenu de la fenêtre de détail d'un podcast.

    Attributs:
        record: Podcast sélectionné
        seasons: Saisons du podcast, dans l'ordre
        updated_label: "Last updated: <date>", vide si la date est invalide
    """

    record: DisplayRecord
    seasons: tuple[SeasonDetail, ...] = ()
    updated_label: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record.id,
            "title": self.record.title,
            "description": self.record.description,
            "genres": list(self.record.genres),
            "seasons": [
                {"title": season.title, "episodes": season.episodes}
                for season in self.seasons
            ],
            "updated": "" if self.record.updated_at is None else str(self.record.updated_at),
            "updated_label": self.updated_label,
        }


def preview_state(record: DisplayRecord) -> dict[str, Any]:
    """État d'aperçu correspondant à un podcast."""
    return {
        "id": record.id,
        "title": record.title,
        "genres": list(record.genres),
        "seasons": record.seasons_count,
        "updated": record.updated_at,
    }


class GalleryService(EventTarget):
    """
    Conteneur de la grille d'aperçus.

    Attributs:
        previews: Aperçus du dernier rendu (remplacés à chaque rendu)
        selected: Dernier détail sélectionné, None tant qu'aucune sélection
    """

    def __init__(self, repository: IPodcastRepository, now: Optional[datetime] = None) -> None:
        super().__init__(parent=None)
        self._repository = repository
        self._now = now
        self._sinks: list[DetailSink] = []
        self.previews: list[PodcastPreview] = []
        self.selected: Optional[PodcastDetail] = None
        self.add_event_listener(SELECT_EVENT, self._on_select)

    def add_detail_sink(self, sink: DetailSink) -> None:
        """Enregistre un destinataire des détails sélectionnés."""
        self._sinks.append(sink)

    def facets(self) -> list[str]:
        return self._repository.list_genre_facets()

    def render(
        self,
        genre: Optional[str] = ALL_GENRES,
        sort: Union[SortMode, str, None] = SortMode.RECENT,
    ) -> list[PodcastPreview]:
        """Crée un aperçu par podcast de la requête, rattaché à ce conteneur."""
        self.previews = [
            PodcastPreview(data=preview_state(record), parent=self, now=self._now)
            for record in self._repository.query(genre=genre, sort=sort)
        ]
        return list(self.previews)

    def detail(self, podcast_id: Union[str, int, None]) -> Optional[PodcastDetail]:
        """Construit le détail d'un podcast, None si l'ID est inconnu."""
        if podcast_id is None:
            return None
        record = self._repository.by_id(podcast_id)
        if record is None:
            return None
        label = format_date(record.updated_at)
        return PodcastDetail(
            record=record,
            seasons=self._repository.season_details(record.id),
            updated_label=f"Last updated: {label}" if label else "",
        )

    def _on_select(self, event: SelectionEvent) -> None:
        podcast_id = (event.detail or {}).get("id")
        detail = self.detail(podcast_id)
        if detail is None:
            logger.debug(f"Sélection ignorée : podcast {podcast_id!r} introuvable")
            return
        self.selected = detail
        for sink in list(self._sinks):
            sink(detail)
