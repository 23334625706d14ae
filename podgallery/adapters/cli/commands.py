"""
Commandes CLI de consultation de la galerie (genres, list, show).
"""

from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from podgallery.adapters.cli.helpers import console, load_container, suppress_loguru
from podgallery.core.value_objects.query import ALL_GENRES, SortMode


def genres() -> None:
    """Liste les genres disponibles pour le filtre."""
    container = load_container()
    with suppress_loguru():
        for facet in container.podcast_repository().list_genre_facets():
            style = "bold" if facet == ALL_GENRES else "cyan"
            console.print(f"[{style}]{facet}[/{style}]")


def list_podcasts(
    genre: Annotated[
        str,
        typer.Option("--genre", "-g", help="Genre exact (défaut: tous)"),
    ] = ALL_GENRES,
    sort: Annotated[
        Optional[str],
        typer.Option("--sort", "-s", help="recent, newest ou popular (défaut: config)"),
    ] = None,
) -> None:
    """
    Affiche la galerie filtrée et triée.

    Exemples:
      podgallery list
      podgallery list --genre Comedy
      podgallery list --sort popular
    """
    container = load_container()
    mode = SortMode.parse(sort) if sort else container.config().sort_mode
    gallery = container.gallery_service()
    previews = gallery.render(genre=genre, sort=mode)

    with suppress_loguru():
        if not previews:
            console.print(f"[yellow]Aucun podcast pour le genre '{genre}'[/yellow]")
            return

        table = Table(title=f"{genre} - {mode.label}", show_header=True, header_style="bold cyan")
        table.add_column("ID", style="dim")
        table.add_column("Titre", style="bold")
        table.add_column("Saisons", justify="right")
        table.add_column("Genres")
        table.add_column("Mise à jour", style="dim")

        for preview in previews:
            content = preview.content
            table.add_row(
                preview.get_state()["id"] or "",
                escape(content.title),
                content.seasons_label,
                escape(", ".join(content.tags)),
                content.updated_label or "",
            )

        console.print(table)
        console.print(f"[dim]{len(previews)} podcast(s)[/dim]")


def show(
    podcast_id: Annotated[str, typer.Argument(help="ID du podcast")],
) -> None:
    """Affiche le détail d'un podcast : description, genres et saisons."""
    container = load_container()
    detail = container.gallery_service().detail(podcast_id)

    with suppress_loguru():
        if detail is None:
            console.print(f"[red]Erreur: podcast introuvable: {podcast_id}[/red]")
            raise typer.Exit(1)

        podcast = detail.record
        body = escape(podcast.description) or "[dim]Pas de description[/dim]"
        if podcast.genres:
            body += "\n\n" + "  ".join(f"[cyan]{escape(g)}[/cyan]" for g in podcast.genres)
        if detail.updated_label:
            body += f"\n[dim]{detail.updated_label}[/dim]"
        console.print(Panel(body, title=f"[bold]{escape(podcast.title)}[/bold]", expand=False))

        if not detail.seasons:
            console.print("[dim]Aucun détail de saison[/dim]")
            return

        table = Table(title="Saisons", show_header=True, header_style="bold cyan")
        table.add_column("Saison")
        table.add_column("Episodes", justify="right")
        for season in detail.seasons:
            table.add_row(escape(season.title), f"{season.episodes} episodes")
        console.print(table)
