"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, préfixée par le composant
- Sortie fichier : sérialisée en JSON, avec rotation, limitée aux logs de la galerie

Chaque enregistrement porte un champ extra « component » (normalizer,
repository, catalog, gallery, web, cli, data) déduit du module émetteur, ce qui
permet de filtrer le fichier JSON par étage du pipeline.
"""

import sys
from pathlib import Path

from loguru import logger

# Préfixe de module -> composant ; le préfixe le plus long l'emporte
_COMPONENTS = {
    "podgallery.services.normalizer": "normalizer",
    "podgallery.services.catalog": "catalog",
    "podgallery.infrastructure": "repository",
    "podgallery.adapters.data": "data",
    "podgallery.adapters.cli": "cli",
    "podgallery.main": "cli",
    "podgallery.web.gallery": "gallery",
    "podgallery.web": "web",
}
_DEFAULT_COMPONENT = "podgallery"


def component_for(module_name: str | None) -> str:
    """Retourne le composant de la galerie correspondant à un nom de module."""
    if not module_name:
        return _DEFAULT_COMPONENT
    matches = [
        prefix
        for prefix in _COMPONENTS
        if module_name == prefix or module_name.startswith(prefix + ".")
    ]
    if not matches:
        return _DEFAULT_COMPONENT
    return _COMPONENTS[max(matches, key=len)]


def _tag_component(record) -> None:
    record["extra"].setdefault("component", component_for(record["name"]))


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/podgallery.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log JSON
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    # Supprime le handler par défaut
    logger.remove()
    logger.configure(patcher=_tag_component)

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<magenta>{extra[component]: <10}</magenta> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON, requêtes de la galerie incluses (DEBUG)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        filter="podgallery",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
