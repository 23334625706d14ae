"""
Route de la galerie - grille d'aperçus avec filtre par genre et tri.
"""

from typing import Optional

from fastapi import APIRouter, Request

from ...core.value_objects.query import ALL_GENRES, SortMode
from ..deps import get_container, templates

router = APIRouter()


@router.get("/")
async def gallery_index(
    request: Request,
    genre: Optional[str] = None,
    sort: Optional[str] = None,
):
    """Page principale de la galerie."""
    container = get_container(request)
    settings = container.config()
    gallery = container.gallery_service()

    current_genre = genre or settings.default_genre
    current_sort = SortMode.parse(sort) if sort else settings.sort_mode
    previews = gallery.render(genre=current_genre, sort=current_sort)

    context = {
        "previews": previews,
        "total_items": len(previews),
        "genres": gallery.facets(),
        "sort_modes": list(SortMode),
        "all_genres": ALL_GENRES,
        "current_genre": current_genre,
        "current_sort": current_sort.value,
    }

    # Si requête HTMX, retourner uniquement la grille
    if request.headers.get("HX-Request"):
        response = templates.TemplateResponse(request, "gallery/_grid.html", context)
        response.headers["Vary"] = "HX-Request"
        return response

    response = templates.TemplateResponse(request, "gallery/index.html", context)
    response.headers["Vary"] = "HX-Request"
    return response
