"""
Application FastAPI de PodGallery.

Initialise l'application web avec le Container DI,
configure les fichiers statiques et monte les routes.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from .routes.api import router as api_router
from .routes.detail import router as detail_router
from .routes.gallery import router as gallery_router

_WEB_DIR = Path(__file__).parent


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Construit l'application ; le catalogue est chargé au démarrage."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise le Container DI et charge le catalogue au démarrage."""
        app.state.container = container if container is not None else Container()
        repository = app.state.container.podcast_repository()
        logger.info(f"Galerie prête : {len(repository)} podcasts")
        yield

    application = FastAPI(title="PodGallery", lifespan=lifespan)

    # Fichiers statiques
    application.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

    # Routes
    application.include_router(gallery_router)
    application.include_router(detail_router)
    application.include_router(api_router)
    return application


app = create_app()
