"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 utilisées par les routes et les composants,
et l'accès au Container DI monté sur l'application.
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.templating import Jinja2Templates

if TYPE_CHECKING:
    from ..container import Container

_WEB_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version disponible dans tous les templates
try:
    _version = version("podgallery")
except PackageNotFoundError:
    _version = "0.0.0"
templates.env.globals["app_version"] = f"PodGallery v{_version}"


def get_container(request: Request) -> "Container":
    """Retourne le Container DI initialisé par le lifespan de l'application."""
    return request.app.state.container
