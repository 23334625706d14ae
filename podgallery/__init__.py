"""
PodGallery - Galerie filtrable de podcasts.

Ce package fournit un moteur de requêtes sur un catalogue statique de podcasts
et un composant d'aperçu encapsulé, servis via une interface Web et une CLI.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur)
- services/ : Couche application (normalisation, coordination de la galerie)
- infrastructure/ : Repository en mémoire
- adapters/ : Couche infrastructure (sources de données, CLI)
- web/ : Application FastAPI et composant d'aperçu
"""
