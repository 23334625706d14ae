"""
Route de détail - contenu de la fenêtre modale d'un podcast.
"""

from fastapi import APIRouter, Request

from ..deps import get_container, templates

router = APIRouter()


@router.get("/podcasts/{podcast_id}")
async def podcast_detail(request: Request, podcast_id: str):
    """Fragment de détail : description, genres, saisons."""
    gallery = get_container(request).gallery_service()
    detail = gallery.detail(podcast_id)
    if detail is None:
        return templates.TemplateResponse(
            request,
            "gallery/not_found.html",
            {"entity_id": podcast_id},
            status_code=404,
        )

    return templates.TemplateResponse(
        request,
        "gallery/_detail.html",
        {"detail": detail, "podcast": detail.record},
    )
