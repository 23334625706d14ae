"""
Fonctions utilitaires partagées dans le projet PodGallery.

Ce module centralise les conversions réutilisées par le normalizer et
le composant d'aperçu :
- coerce_count : conversion tolérante vers un entier positif
- split_list : découpage d'une liste séparée par des virgules
- join_list : sérialisation inverse de split_list
"""

import math
from typing import Any, Iterable, Union


def coerce_count(value: Any, default: int = 0) -> int:
    """
    Convertit une valeur en entier positif ou nul.

    Les chaînes numériques sont acceptées ("3", " 4 ", "2.0").
    Toute valeur non numérique, négative ou non finie retourne `default`.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value >= 0 else default
    if isinstance(value, float):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return default
        try:
            return coerce_count(int(text), default)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return default
    if not math.isfinite(number) or number < 0:
        return default
    return int(number)


def split_list(value: Union[str, Iterable[Any], None]) -> list[str]:
    """
    Normalise une liste de chaînes.

    Accepte une chaîne séparée par des virgules ou un iterable ; chaque
    élément est nettoyé et les éléments vides sont retirés.
    """
    if value is None:
        return []
    if isinstance(value, str):
        items: Iterable[Any] = value.split(",")
    else:
        items = value
    result = []
    for item in items:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            result.append(text)
    return result


def join_list(value: Union[str, Iterable[Any], None]) -> str:
    """Sérialise une liste en chaîne séparée par des virgules."""
    return ",".join(split_list(value))
