"""
Utilitaires partagés pour les commandes CLI de PodGallery.

Ce module fournit :
- console : instance Rich Console partagée
- suppress_loguru : context manager pour désactiver/réactiver les logs loguru
- load_container : container initialisé, catalogue chargé (sortie propre si erreur)
"""

from contextlib import contextmanager

import typer
from loguru import logger as loguru_logger
from rich.console import Console

from podgallery.container import Container
from podgallery.core.ports.data_source import DataSourceError

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour désactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("podgallery")
    try:
        yield
    finally:
        loguru_logger.enable("podgallery")


def load_container() -> Container:
    """
    Crée le container et charge le catalogue.

    Raises:
        typer.Exit: Code 1 si la source de données est invalide
    """
    container = Container()
    try:
        container.podcast_repository()
    except DataSourceError as exc:
        console.print(f"[red]Erreur: {exc}[/red]")
        raise typer.Exit(1) from exc
    return container
