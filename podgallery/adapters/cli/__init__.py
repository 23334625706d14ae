"""Sous-package CLI - re-exporte les commandes publiques."""

from podgallery.adapters.cli.commands import genres, list_podcasts, show

__all__ = [
    "genres",
    "list_podcasts",
    "show",
]
