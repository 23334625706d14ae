"""
Événements synchrones des composants de la galerie.

Modèle minimal de propagation d'événements :
- EventTarget : noeud pouvant recevoir des écouteurs et propager vers son parent
- ShadowRoot : frontière d'encapsulation, seuls les événements `composed`
  la traversent vers l'hôte
- Event / SelectionEvent : événements propagés

La propagation est synchrone : tous les écouteurs sont exécutés avant le
retour de dispatch_event().
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

# Nom de l'événement de sélection émis par l'aperçu de podcast
SELECT_EVENT = "podcast-select"

Listener = Callable[["Event"], None]


@dataclass
class Event:
    """
    Événement propagé dans l'arbre des composants.

    Attributs:
        type: Nom de l'événement
        detail: Données transportées
        bubbles: Propagation vers les ancêtres
        composed: Traversée des frontières ShadowRoot
        target: Nœud émetteur (renseigné par dispatch_event)
        current_target: Noeud dont les écouteurs sont en cours d'exécution
    """

    type: str
    detail: Any = None
    bubbles: bool = False
    composed: bool = False
    target: Optional["EventTarget"] = field(default=None, repr=False)
    current_target: Optional["EventTarget"] = field(default=None, repr=False)
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


@dataclass
class PointerEvent(Event):
    """Activation par pointeur ; button 0 est le bouton principal."""

    button: int = 0


@dataclass
class KeyboardEvent(Event):
    key: str = ""


@dataclass
class SelectionEvent(Event):
    """Sélection d'un podcast : traverse l'encapsulation et remonte l'arbre."""

    type: str = SELECT_EVENT
    bubbles: bool = True
    composed: bool = True


class EventTarget:
    """Noeud de l'arbre des composants."""

    def __init__(self, parent: Optional["EventTarget"] = None) -> None:
        self.parent = parent
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        if listener not in self._listeners[event_type]:
            self._listeners[event_type].append(listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        if listener in self._listeners[event_type]:
            self._listeners[event_type].remove(listener)

    def _propagation_parent(self, event: Event) -> Optional["EventTarget"]:
        return self.parent

    def dispatch_event(self, event: Event) -> bool:
        """
        Propage l'événement depuis ce noeud.

        Returns:
            False si un écouteur a appelé prevent_default(), True sinon
        """
        event.target = self
        node: Optional[EventTarget] = self
        while node is not None:
            event.current_target = node
            for listener in list(node._listeners.get(event.type, ())):
                listener(event)
            if event.propagation_stopped or not event.bubbles:
                break
            node = node._propagation_parent(event)
        event.current_target = None
        return not event.default_prevented


class ShadowRoot(EventTarget):
    """
    Racine encapsulée d'un composant.

    Les événements internes non `composed` s'arrêtent ici ; les événements
    `composed` continuent vers l'hôte puis ses ancêtres.
    """

    def __init__(self, host: EventTarget) -> None:
        super().__init__(parent=None)
        self.host = host

    def _propagation_parent(self, event: Event) -> Optional[EventTarget]:
        return self.host if event.composed else None
