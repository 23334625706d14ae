"""
API JSON de la galerie.

Expose les mêmes requêtes que la page HTML, avec les aperçus sérialisés
au format de l'événement de sélection.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request

from ...core.value_objects.query import ALL_GENRES, SortMode
from ..deps import get_container

router = APIRouter(prefix="/api")


@router.get("/genres")
async def list_genres(request: Request) -> list[str]:
    """Sentinelle puis genres distincts."""
    return get_container(request).podcast_repository().list_genre_facets()


@router.get("/podcasts")
async def list_podcasts(
    request: Request,
    genre: Optional[str] = ALL_GENRES,
    sort: Optional[str] = None,
) -> list[dict]:
    """Aperçus filtrés et triés."""
    container = get_container(request)
    gallery = container.gallery_service()
    previews = gallery.render(
        genre=genre or ALL_GENRES,
        sort=SortMode.parse(sort) if sort else container.config().sort_mode,
    )
    return [preview.get_state() for preview in previews]


@router.get("/podcasts/{podcast_id}")
async def get_podcast(request: Request, podcast_id: str) -> dict:
    """Détail d'un podcast."""
    detail = get_container(request).gallery_service().detail(podcast_id)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Podcast introuvable : {podcast_id}")
    return detail.to_dict()
