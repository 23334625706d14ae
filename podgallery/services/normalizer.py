"""
Normalisation du catalogue brut en DisplayRecord.

Transforme les trois collections brutes (podcasts, genres, saisons) en une
séquence ordonnée d'enregistrements d'affichage uniformes. Les tables de
correspondance sont construites une fois puis passées explicitement :
aucun état global n'est conservé.

Seul l'identifiant est obligatoire : tout autre champ mal formé retombe
sur sa valeur par défaut.
"""

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from loguru import logger

from podgallery.core.entities.podcast import DisplayRecord, SeasonDetail
from podgallery.utils.helpers import coerce_count

GenreLookup = Mapping[Any, str]
SeasonLookup = Mapping[str, tuple[SeasonDetail, ...]]


class MalformedInputError(ValueError):
    """Podcast brut sans identifiant exploitable."""


def _as_items(value: Any) -> tuple:
    """Retourne les éléments d'une liste brute, ou rien si ce n'est pas une liste."""
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


def _mappings(value: Any) -> tuple[Mapping[str, Any], ...]:
    return tuple(item for item in _as_items(value) if isinstance(item, Mapping))


def build_genre_lookup(raw_genres: Iterable[Mapping[str, Any]]) -> GenreLookup:
    """
    Construit la table ID de genre -> nom de genre.

    En cas d'ID dupliqué, la dernière entrée l'emporte. Les entrées sans ID
    ou avec un ID non hachable sont ignorées.
    """
    lookup: dict[Any, str] = {}
    for genre in _mappings(list(raw_genres or ())):
        genre_id = genre.get("id")
        if genre_id is None:
            continue
        try:
            lookup[genre_id] = str(genre.get("title") or "")
        except TypeError:
            logger.debug(f"ID de genre non hachable ignoré : {genre_id!r}")
    return MappingProxyType(lookup)


def build_season_lookup(raw_seasons: Iterable[Mapping[str, Any]]) -> SeasonLookup:
    """
    Construit la table ID de podcast -> saisons.

    Les IDs sont convertis en chaîne pour correspondre à DisplayRecord.id.
    Un seasonDetails qui n'est pas une liste donne un podcast sans saison.
    """
    lookup: dict[str, tuple[SeasonDetail, ...]] = {}
    for entry in _mappings(list(raw_seasons or ())):
        if entry.get("id") is None:
            continue
        details = tuple(
            SeasonDetail(
                title=str(season.get("title") or ""),
                episodes=coerce_count(season.get("episodes")),
            )
            for season in _mappings(entry.get("seasonDetails"))
        )
        lookup[str(entry["id"])] = details
    return MappingProxyType(lookup)


def _resolve_genres(genre_ids: Optional[Iterable[Any]], genre_lookup: GenreLookup) -> tuple[str, ...]:
    """Traduit les IDs de genre en noms, en ignorant les IDs inconnus."""
    names = []
    for genre_id in _as_items(genre_ids):
        try:
            name = genre_lookup.get(genre_id)
        except TypeError:
            continue
        if name:
            names.append(name)
    return tuple(names)


def normalize_podcast(
    raw: Mapping[str, Any],
    index: int,
    total: int,
    genre_lookup: GenreLookup,
    season_lookup: SeasonLookup,
) -> DisplayRecord:
    """
    Normalise un podcast brut.

    Args:
        raw: Podcast brut
        index: Position du podcast dans les données d'entrée
        total: Nombre total de podcasts en entrée
        genre_lookup: Table ID de genre -> nom
        season_lookup: Table ID de podcast -> saisons

    Returns:
        DisplayRecord correspondant

    Raises:
        MalformedInputError: Si le podcast n'est pas un objet ou n'a pas d'ID
    """
    if not isinstance(raw, Mapping):
        raise MalformedInputError(f"Objet attendu à la position {index}")
    raw_id = raw.get("id")
    if raw_id is None:
        raise MalformedInputError(f"Podcast sans id à la position {index}")
    podcast_id = str(raw_id)

    explicit_seasons = raw.get("seasons")
    if explicit_seasons is not None:
        seasons_count = coerce_count(explicit_seasons)
    else:
        seasons_count = len(season_lookup.get(podcast_id, ()))

    return DisplayRecord(
        id=podcast_id,
        title=str(raw.get("title") or ""),
        description=str(raw.get("description") or ""),
        genres=_resolve_genres(raw.get("genres"), genre_lookup),
        seasons_count=seasons_count,
        updated_at=raw.get("updated"),
        popularity=total - index,
    )


def normalize_with_lookups(
    raw_podcasts: Iterable[Mapping[str, Any]],
    genre_lookup: GenreLookup,
    season_lookup: SeasonLookup,
) -> list[DisplayRecord]:
    """
    Normalise les podcasts bruts avec des tables déjà construites.

    Les podcasts sans ID sont ignorés (avec un avertissement) sans
    interrompre la normalisation des autres. Le rang de popularité reste
    calculé sur la position d'origine.
    """
    podcasts = list(raw_podcasts or ())
    total = len(podcasts)
    records = []
    for index, raw in enumerate(podcasts):
        try:
            records.append(normalize_podcast(raw, index, total, genre_lookup, season_lookup))
        except MalformedInputError as exc:
            logger.warning(f"Podcast ignoré : {exc}")

    logger.debug(f"{len(records)}/{total} podcasts normalisés")
    return records


def normalize(
    raw_podcasts: Iterable[Mapping[str, Any]],
    raw_genres: Iterable[Mapping[str, Any]],
    raw_seasons: Iterable[Mapping[str, Any]],
) -> list[DisplayRecord]:
    """
    Normalise le catalogue brut complet, dans l'ordre d'entrée.

    Returns:
        Liste de DisplayRecord
    """
    return normalize_with_lookups(
        raw_podcasts,
        build_genre_lookup(raw_genres),
        build_season_lookup(raw_seasons),
    )
