"""
Container d'injection de dépendances via dependency-injector.

Fournit une gestion centralisée des dépendances pour les interfaces CLI et Web.
"""

from dependency_injector import containers, providers

from .adapters.data.sources import data_source_for
from .config import Settings
from .services.catalog import CatalogService
from .web.gallery import GalleryService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        repository = container.podcast_repository()
        gallery = container.gallery_service()
    """

    # Configuration - singleton chargé une seule fois
    config = providers.Singleton(Settings)

    # Source du catalogue brut : fichier JSON si configuré, sinon catalogue embarqué
    data_source = providers.Singleton(
        data_source_for,
        data_file=config.provided.data_file,
    )

    catalog_service = providers.Singleton(
        CatalogService,
        data_source=data_source,
    )

    # Repository - chargé et normalisé une seule fois (rechargement via catalog_service)
    podcast_repository = providers.Singleton(
        lambda service: service.build_repository(),
        catalog_service,
    )

    # Coordinateur de la galerie - Factory : une grille par rendu
    gallery_service = providers.Factory(
        GalleryService,
        repository=podcast_repository,
    )
