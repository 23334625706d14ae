"""Repositories en mémoire."""

from podgallery.infrastructure.memory.podcast_repository import InMemoryPodcastRepository

__all__ = ["InMemoryPodcastRepository"]
