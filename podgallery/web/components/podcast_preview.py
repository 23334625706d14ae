"""
Composant <podcast-preview> - aperçu encapsulé d'un podcast.

Le composant ne conserve que ses attributs (podcast-id, title, genres,
seasons, updated) : son état est entièrement reconstructible à partir de
ceux-ci. Son rendu est une fonction pure de cet état, produit dans une
racine encapsulée (ShadowRoot) construite une seule fois.

Une activation (clic principal, Entrée ou Espace) émet un unique événement
`podcast-select` dont le détail est l'état courant. Cet événement traverse
l'encapsulation et remonte vers les conteneurs ancêtres.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, TypedDict

from markupsafe import Markup

from podgallery.utils.helpers import coerce_count, join_list, split_list
from podgallery.utils.time_format import format_date, parse_date, time_ago

from ..deps import templates
from .events import (
    EventTarget,
    KeyboardEvent,
    PointerEvent,
    SelectionEvent,
    ShadowRoot,
)

TAG_NAME = "podcast-preview"
OBSERVED_ATTRIBUTES = ("podcast-id", "title", "genres", "seasons", "updated")
TITLE_PLACEHOLDER = "Podcast Title"
ACTIVATION_KEYS = ("Enter", " ")

# Champ d'état -> attribut sérialisé
_STATE_ATTRIBUTES = {
    "id": "podcast-id",
    "title": "title",
    "genres": "genres",
    "seasons": "seasons",
    "updated": "updated",
}


class PreviewState(TypedDict):
    """État d'un aperçu, tel qu'émis dans l'événement de sélection."""

    id: Optional[str]
    title: str
    genres: list[str]
    seasons: int
    updated: str


@dataclass(frozen=True)
class PreviewContent:
    """
    Contenu affiché par l'aperçu, dérivé de l'état.

    Attributs:
        title: Titre affiché (placeholder si vide)
        seasons_label: "1 season" ou "N seasons"
        tags: Un tag par genre, dans l'ordre
        updated_label: "Updated <relatif>", None si la date est absente ou invalide
        updated_title: Date absolue en infobulle, None avec updated_label
    """

    title: str
    seasons_label: str
    tags: tuple[str, ...] = ()
    updated_label: Optional[str] = None
    updated_title: Optional[str] = None


def seasons_label(count: int) -> str:
    """Libellé pluralisé du nombre de saisons."""
    return f"{count} season{'' if count == 1 else 's'}"


class PodcastPreview(EventTarget):
    """
    Aperçu d'un podcast piloté par ses attributs.

    Attributs:
        shadow_root: Racine encapsulée contenant la carte
        content: Dernier contenu rendu
        structure_builds: Nombre de constructions de la structure interne (toujours 1)
    """

    tag_name = TAG_NAME

    def __init__(
        self,
        data: Optional[Mapping[str, Any]] = None,
        parent: Optional[EventTarget] = None,
        now: Optional[datetime] = None,
    ) -> None:
        super().__init__(parent)
        self._attributes: dict[str, str] = {}
        self._now = now
        self.structure_builds = 0
        self.content: Optional[PreviewContent] = None
        self._attach_shadow()
        if data:
            self._apply(data)
        self.render()

    # --- Structure interne ---

    def _attach_shadow(self) -> None:
        """Construit la racine encapsulée et la carte interne."""
        self.shadow_root = ShadowRoot(host=self)
        self._card = EventTarget(parent=self.shadow_root)
        self._template = templates.get_template("components/podcast_preview.html")
        self._card.add_event_listener("click", self._on_click)
        self._card.add_event_listener("keydown", self._on_keydown)
        self.structure_builds += 1

    # --- Surface d'attributs ---

    @property
    def attributes(self) -> dict[str, str]:
        return dict(self._attributes)

    def get_attribute(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = str(value)
        if name in OBSERVED_ATTRIBUTES:
            self.render()

    def remove_attribute(self, name: str) -> None:
        if self._attributes.pop(name, None) is not None and name in OBSERVED_ATTRIBUTES:
            self.render()

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, str],
        parent: Optional[EventTarget] = None,
        now: Optional[datetime] = None,
    ) -> "PodcastPreview":
        """Reconstruit un aperçu à partir de ses attributs sérialisés."""
        preview = cls(parent=parent, now=now)
        preview._attributes.update({key: str(value) for key, value in attributes.items()})
        preview.render()
        return preview

    # --- État ---

    def _apply(self, data: Mapping[str, Any]) -> None:
        for key, attribute in _STATE_ATTRIBUTES.items():
            value = data.get(key)
            if value is None:
                continue
            if key == "genres":
                self._attributes[attribute] = join_list(value)
            else:
                self._attributes[attribute] = str(value)

    def set_state(self, data: Optional[Mapping[str, Any]]) -> None:
        """
        Met à jour tout ou partie de l'état puis relance le rendu.

        Champs reconnus : id, title, genres, seasons, updated. Les champs
        absents ou None conservent leur valeur. genres accepte une séquence
        ou une chaîne séparée par des virgules.
        """
        if not data:
            return
        self._apply(data)
        self.render()

    def get_state(self) -> PreviewState:
        """Reconstruit l'état à partir des attributs."""
        return PreviewState(
            id=self._attributes.get("podcast-id"),
            title=self._attributes.get("title") or "",
            genres=split_list(self._attributes.get("genres")),
            seasons=coerce_count(self._attributes.get("seasons")),
            updated=self._attributes.get("updated") or "",
        )

    # --- Rendu ---

    def render(self) -> PreviewContent:
        """Recalcule le contenu affiché à partir de l'état courant."""
        state = self.get_state()
        updated_label = updated_title = None
        if state["updated"] and parse_date(state["updated"]) is not None:
            updated_label = f"Updated {time_ago(state['updated'], now=self._now)}"
            updated_title = format_date(state["updated"])

        self.content = PreviewContent(
            title=state["title"] or TITLE_PLACEHOLDER,
            seasons_label=seasons_label(state["seasons"]),
            tags=tuple(state["genres"]),
            updated_label=updated_label,
            updated_title=updated_title,
        )
        return self.content

    def to_html(self) -> Markup:
        """Sérialise l'hôte, ses attributs et sa racine encapsulée en HTML."""
        return Markup(
            self._template.render(
                tag_name=self.tag_name,
                attributes=self._attributes,
                content=self.content,
            )
        )

    def __html__(self) -> Markup:
        return self.to_html()

    # --- Activation ---

    def click(self, button: int = 0) -> None:
        """Simule une activation par pointeur sur la carte."""
        self._card.dispatch_event(PointerEvent(type="click", bubbles=True, button=button))

    def press_key(self, key: str) -> bool:
        """
        Simule une touche pressée sur la carte.

        Returns:
            True si l'action par défaut a été supprimée (activation)
        """
        event = KeyboardEvent(type="keydown", bubbles=True, key=key)
        self._card.dispatch_event(event)
        return event.default_prevented

    def _on_click(self, event: PointerEvent) -> None:
        if event.button == 0:
            self._emit()

    def _on_keydown(self, event: KeyboardEvent) -> None:
        if event.key in ACTIVATION_KEYS:
            event.prevent_default()
            self._emit()

    def _emit(self) -> None:
        self.dispatch_event(SelectionEvent(detail=self.get_state()))
