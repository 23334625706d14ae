"""
Couche infrastructure.

Implémentations concrètes des ports du domaine.
"""
