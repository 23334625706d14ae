"""Routes de l'application web : galerie, détail, API JSON."""
