"""
Composants d'affichage de la galerie.

Exports:
- PodcastPreview: aperçu encapsulé d'un podcast
- SelectionEvent, EventTarget: propagation des événements de sélection
"""

from .events import SELECT_EVENT, Event, EventTarget, SelectionEvent, ShadowRoot
from .podcast_preview import (
    OBSERVED_ATTRIBUTES,
    PodcastPreview,
    PreviewContent,
    PreviewState,
    seasons_label,
)

__all__ = [
    "OBSERVED_ATTRIBUTES",
    "SELECT_EVENT",
    "Event",
    "EventTarget",
    "PodcastPreview",
    "PreviewContent",
    "PreviewState",
    "SelectionEvent",
    "ShadowRoot",
    "seasons_label",
]
