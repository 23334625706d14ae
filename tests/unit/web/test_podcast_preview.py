"""
Tests unitaires pour le composant PodcastPreview.

Tests couvrant:
- Aller-retour set_state / get_state et coercition des types
- Surface d'attributs et reconstruction (from_attributes)
- Rendu : placeholder, pluralisation, tags, libellés de date
- Activation : clic principal, Entrée, Espace, événement unique
- Encapsulation : structure construite une fois, événements internes confinés
"""

import pytest

from podgallery.web.components.events import SELECT_EVENT, EventTarget
from podgallery.web.components.podcast_preview import (
    OBSERVED_ATTRIBUTES,
    TITLE_PLACEHOLDER,
    PodcastPreview,
    seasons_label,
)


@pytest.fixture
def state() -> dict:
    return {
        "id": "7",
        "title": "Seven",
        "genres": ["Comedy", "News"],
        "seasons": 3,
        "updated": "2022-05-29T12:00:00Z",
    }


@pytest.fixture
def container() -> EventTarget:
    return EventTarget()


@pytest.fixture
def preview(state, container, now) -> PodcastPreview:
    return PodcastPreview(data=state, parent=container, now=now)


def _collect(target: EventTarget) -> list:
    events = []
    target.add_event_listener(SELECT_EVENT, events.append)
    return events


class TestState:
    """Tests de set_state / get_state."""

    def test_round_trip(self, state):
        p = PodcastPreview()
        p.set_state(state)
        assert p.get_state() == state

    def test_round_trip_with_coercion(self):
        p = PodcastPreview()
        p.set_state({"id": 7, "seasons": "4", "genres": " Comedy , ,News "})
        result = p.get_state()
        assert result["id"] == "7"
        assert result["seasons"] == 4
        assert result["genres"] == ["Comedy", "News"]

    def test_partial_update_keeps_other_fields(self, preview, state):
        preview.set_state({"title": "Renamed", "seasons": None})
        result = preview.get_state()
        assert result["title"] == "Renamed"
        assert result["seasons"] == state["seasons"]
        assert result["genres"] == state["genres"]

    def test_defaults_when_empty(self):
        assert PodcastPreview().get_state() == {
            "id": None,
            "title": "",
            "genres": [],
            "seasons": 0,
            "updated": "",
        }

    def test_non_numeric_seasons_degrade_to_zero(self):
        p = PodcastPreview(data={"seasons": "lots"})
        assert p.get_state()["seasons"] == 0
        assert p.content.seasons_label == "0 seasons"

    def test_set_state_ignores_unknown_fields(self):
        p = PodcastPreview(data={"id": "1", "description": "ignored"})
        assert "description" not in p.attributes


class TestAttributes:
    """Tests de la surface d'attributs sérialisés."""

    def test_serialized_attributes(self, preview):
        assert preview.attributes == {
            "podcast-id": "7",
            "title": "Seven",
            "genres": "Comedy,News",
            "seasons": "3",
            "updated": "2022-05-29T12:00:00Z",
        }

    def test_observed_attributes(self):
        assert OBSERVED_ATTRIBUTES == ("podcast-id", "title", "genres", "seasons", "updated")

    def test_from_attributes_reconstructs_state(self, preview, now):
        copy = PodcastPreview.from_attributes(preview.attributes, now=now)
        assert copy.get_state() == preview.get_state()
        assert copy.content == preview.content
        assert copy.attributes == preview.attributes

    def test_set_attribute_rerenders(self, preview):
        preview.set_attribute("seasons", "1")
        assert preview.content.seasons_label == "1 season"

    def test_remove_attribute_rerenders(self, preview):
        preview.remove_attribute("updated")
        assert preview.content.updated_label is None
        assert preview.content.updated_title is None


class TestRender:
    """Tests du contenu rendu."""

    def test_content(self, preview):
        content = preview.content
        assert content.title == "Seven"
        assert content.seasons_label == "3 seasons"
        assert content.tags == ("Comedy", "News")
        assert content.updated_label == "Updated 3 days ago"
        assert content.updated_title == "May 29, 2022"

    def test_title_placeholder(self):
        assert PodcastPreview(data={"title": ""}).content.title == TITLE_PLACEHOLDER

    @pytest.mark.parametrize("count,label", [(0, "0 seasons"), (1, "1 season"), (2, "2 seasons")])
    def test_pluralization(self, count, label):
        assert seasons_label(count) == label
        assert PodcastPreview(data={"seasons": count}).content.seasons_label == label

    def test_no_date_line_without_updated(self):
        content = PodcastPreview(data={"id": "1"}).content
        assert content.updated_label is None
        assert content.updated_title is None

    def test_no_date_line_for_invalid_date(self):
        content = PodcastPreview(data={"updated": "someday"}).content
        assert content.updated_label is None

    def test_render_is_idempotent(self, preview):
        first = preview.content
        assert preview.render() == first

    def test_html_contains_shadow_root_and_attributes(self, preview):
        html = str(preview.to_html())
        assert html.startswith('<podcast-preview podcast-id="7"')
        assert 'shadowrootmode="open"' in html
        assert "<style>" in html
        assert '<span class="pill">Comedy</span>' in html
        assert "3 seasons" in html
        assert 'title="May 29, 2022"' in html

    def test_html_is_escaped(self):
        html = str(PodcastPreview(data={"title": "<b>Bold</b>"}).to_html())
        assert "<b>Bold</b>" not in html
        assert "&lt;b&gt;Bold&lt;/b&gt;" in html


class TestStructure:
    """La structure interne est construite une seule fois."""

    def test_structure_built_once(self, preview, state):
        preview.set_state({"title": "Other"})
        preview.set_attribute("genres", "History")
        preview.set_state(state)
        assert preview.structure_builds == 1

    def test_shadow_root_is_stable(self, preview):
        shadow = preview.shadow_root
        preview.set_state({"title": "Other"})
        assert preview.shadow_root is shadow


class TestActivation:
    """Tests de l'émission de l'événement de sélection."""

    def test_click_emits_one_event(self, preview, container):
        events = _collect(container)
        preview.click()
        assert len(events) == 1
        assert events[0].detail["id"] == "7"

    def test_payload_is_current_state(self, preview, container):
        events = _collect(container)
        preview.set_state({"title": "Changed"})
        preview.click()
        assert events[0].detail == preview.get_state()

    def test_secondary_button_does_not_select(self, preview, container):
        events = _collect(container)
        preview.click(button=2)
        assert events == []

    @pytest.mark.parametrize("key", ["Enter", " "])
    def test_activation_keys(self, preview, container, key):
        events = _collect(container)
        prevented = preview.press_key(key)
        assert prevented is True
        assert len(events) == 1

    @pytest.mark.parametrize("key", ["a", "Tab", "Escape"])
    def test_other_keys_ignored(self, preview, container, key):
        events = _collect(container)
        assert preview.press_key(key) is False
        assert events == []

    def test_event_crosses_boundary_and_bubbles(self, preview, container):
        events = _collect(container)
        preview.click()
        event = events[0]
        assert event.bubbles and event.composed
        assert event.target is preview

    def test_raw_click_does_not_leak(self, preview, container):
        clicks = []
        container.add_event_listener("click", clicks.append)
        preview.add_event_listener("click", clicks.append)
        preview.click()
        assert clicks == []

    def test_multiple_ancestors_receive_event(self, state, now):
        outer = EventTarget()
        inner = EventTarget(parent=outer)
        p = PodcastPreview(data=state, parent=inner, now=now)
        outer_events, inner_events = _collect(outer), _collect(inner)
        p.click()
        assert len(outer_events) == 1 and len(inner_events) == 1
