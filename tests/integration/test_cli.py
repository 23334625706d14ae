"""
Tests d'intégration de la CLI PodGallery.

Commandes testées :
- genres : facettes du filtre
- list : galerie filtrée et triée
- show : détail d'un podcast (et code de sortie si inconnu)
- info / version
"""

import json

import pytest
from loguru import logger
from typer.testing import CliRunner

from podgallery.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(tmp_path, monkeypatch, raw_podcasts, raw_genres, raw_seasons):
    """Catalogue de test dans un fichier JSON, logs dans tmp_path."""
    data_file = tmp_path / "catalog.json"
    data_file.write_text(
        json.dumps({"podcasts": raw_podcasts, "genres": raw_genres, "seasons": raw_seasons}),
        encoding="utf-8",
    )
    monkeypatch.setenv("PODGALLERY_DATA_FILE", str(data_file))
    monkeypatch.setenv("PODGALLERY_LOG_FILE", str(tmp_path / "logs" / "cli.log"))
    yield data_file
    # Les handlers pointent vers les flux du runner, fermés après l'appel
    logger.remove()


class TestGenresCommand:
    """Tests de la commande genres."""

    def test_lists_facets_in_order(self):
        result = runner.invoke(app, ["-q", "genres"])
        assert result.exit_code == 0
        lines = [line.strip() for line in result.output.splitlines() if line.strip()]
        assert lines == ["All Genres", "Comedy", "History", "News"]


class TestListCommand:
    """Tests de la commande list."""

    def test_lists_all(self):
        result = runner.invoke(app, ["-q", "list"])
        assert result.exit_code == 0
        assert "Alpha" in result.output
        assert "Gamma" in result.output
        assert "4 podcast(s)" in result.output

    def test_recent_order(self):
        result = runner.invoke(app, ["-q", "list"])
        output = result.output
        assert output.index("Beta") < output.index("Alpha") < output.index("Gamma")

    def test_popular_order(self):
        result = runner.invoke(app, ["-q", "list", "--sort", "popular"])
        output = result.output
        assert output.index("Alpha") < output.index("Beta") < output.index("Gamma")

    def test_configured_default_sort(self, monkeypatch):
        monkeypatch.setenv("PODGALLERY_DEFAULT_SORT", "popular")
        result = runner.invoke(app, ["-q", "list"])
        output = result.output
        assert output.index("Alpha") < output.index("Beta") < output.index("Gamma")

    def test_genre_filter(self):
        result = runner.invoke(app, ["-q", "list", "--genre", "Comedy"])
        assert result.exit_code == 0
        assert "2 podcast(s)" in result.output
        assert "Beta" not in result.output

    def test_empty_genre(self):
        result = runner.invoke(app, ["-q", "list", "-g", "Jazz"])
        assert result.exit_code == 0
        assert "Aucun podcast" in result.output


class TestShowCommand:
    """Tests de la commande show."""

    def test_show_with_seasons(self):
        result = runner.invoke(app, ["-q", "show", "b"])
        assert result.exit_code == 0
        assert "Beta" in result.output
        assert "10 episodes" in result.output
        assert "8 episodes" in result.output

    def test_show_without_seasons(self):
        result = runner.invoke(app, ["-q", "show", "a"])
        assert result.exit_code == 0
        assert "First" in result.output
        assert "Aucun détail de saison" in result.output

    def test_unknown_id_exits_with_error(self):
        result = runner.invoke(app, ["-q", "show", "missing"])
        assert result.exit_code == 1
        assert "introuvable" in result.output


class TestDataFileErrors:
    """Tests des erreurs de source de données."""

    def test_missing_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PODGALLERY_DATA_FILE", str(tmp_path / "absent.json"))
        result = runner.invoke(app, ["-q", "genres"])
        assert result.exit_code == 1
        assert "introuvable" in result.output

    def test_invalid_payload(self, cli_env):
        cli_env.write_text("[1, 2]", encoding="utf-8")
        result = runner.invoke(app, ["-q", "list"])
        assert result.exit_code == 1
        assert "Objet JSON attendu" in result.output


class TestInfoAndVersion:
    """Tests des commandes info et version."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "PodGallery v0.1.0" in result.output

    def test_info_shows_data_file(self, cli_env):
        result = runner.invoke(app, ["-q", "info"])
        assert result.exit_code == 0
        assert "Tri par défaut : recent" in result.output
        assert cli_env.name in result.output
