"""
Point d'entrée CLI de PodGallery.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import genres, list_podcasts, show
from .config import Settings
from .logging_config import configure_logging

app = typer.Typer(
    name="podgallery",
    help="Galerie filtrable de podcasts",
)

# État global pour les options de verbosité
state = {"verbose": 0, "quiet": False}

_VERBOSE_LEVELS = {0: None, 1: "INFO", 2: "DEBUG"}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosité (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """PodGallery - Galerie de podcasts."""
    settings = get_config()
    if quiet:
        state["quiet"] = True
        level = "ERROR"
    else:
        state["verbose"] = verbose
        level = _VERBOSE_LEVELS.get(min(verbose, 2)) or settings.log_level
    configure_logging(
        log_level=level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Monter les commandes depuis commands.py
app.command()(genres)
# Note: "list" masquerait le builtin, donc on utilise name= explicitement
app.command(name="list")(list_podcasts)
app.command()(show)


def get_config() -> Settings:
    """Récupère les paramètres de l'application."""
    return Settings()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration PodGallery")
    typer.echo(f"Données : {config.data_file or 'catalogue embarqué'}")
    typer.echo(f"Genre par défaut : {config.default_genre}")
    typer.echo(f"Tri par défaut : {config.default_sort}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo("PodGallery v0.1.0")


@app.command()
def serve(
    host: Annotated[str, typer.Option(help="Adresse d'écoute")] = "127.0.0.1",
    port: Annotated[int, typer.Option(help="Port d'écoute")] = 8000,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur web PodGallery."""
    import uvicorn

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("podgallery.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
