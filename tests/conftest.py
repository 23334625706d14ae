"""
Fixtures pytest partagées pour les tests PodGallery.

Ce module contient les fixtures communes utilisées dans les tests:
- Catalogue brut de test (podcasts, genres, saisons)
- Repository en mémoire construit à partir de ce catalogue
- Instant de référence fixe pour les libellés relatifs
- Settings de test avec chemins temporaires
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from podgallery.config import Settings
from podgallery.infrastructure.memory.podcast_repository import InMemoryPodcastRepository
from podgallery.services.normalizer import build_season_lookup, normalize


@pytest.fixture
def raw_genres() -> list[dict]:
    """Genres bruts : ID -> titre."""
    return [
        {"id": 1, "title": "Comedy"},
        {"id": 2, "title": "History"},
        {"id": 3, "title": "News"},
    ]


@pytest.fixture
def raw_podcasts() -> list[dict]:
    """
    Podcasts bruts dans l'ordre d'entrée.

    - "a" et "c" partagent la même date (stabilité du tri)
    - "b" n'a pas de saisons explicites (dérivées des détails)
    - "d" référence un genre inconnu (99) et n'a pas de date
    """
    return [
        {"id": "a", "title": "Alpha", "description": "First", "genres": [1, 2], "seasons": 3, "updated": "2022-01-10"},
        {"id": "b", "title": "Beta", "genres": [2], "updated": "2022-05-01T12:00:00Z"},
        {"id": "c", "title": "Gamma", "genres": [1, 3], "seasons": 1, "updated": "2022-01-10"},
        {"id": "d", "title": "", "genres": [99, 3], "seasons": "2"},
    ]


@pytest.fixture
def raw_seasons() -> list[dict]:
    """Détails de saisons par podcast."""
    return [
        {
            "id": "b",
            "seasonDetails": [
                {"title": "Season 1", "episodes": 10},
                {"title": "Season 2", "episodes": 8},
            ],
        },
    ]


@pytest.fixture
def repository(raw_podcasts, raw_genres, raw_seasons) -> InMemoryPodcastRepository:
    """Repository construit à partir du catalogue de test."""
    return InMemoryPodcastRepository(
        normalize(raw_podcasts, raw_genres, raw_seasons),
        build_season_lookup(raw_seasons),
    )


@pytest.fixture
def now() -> datetime:
    """Instant de référence fixe pour les libellés relatifs."""
    return datetime(2022, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log de chaque test.
    """
    return Settings(
        data_file=None,
        log_file=tmp_path / "test.log",
    )
