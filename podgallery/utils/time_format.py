"""
Formatage des dates du catalogue.

Ce module fournit :
- parse_date : conversion d'une valeur date-like (ISO, epoch ms) en datetime UTC
- sort_timestamp : clé de tri numérique (les dates invalides passent en dernier)
- time_ago : libellé relatif en anglais ("3 days ago", "yesterday")
- format_date : date absolue longue ("January 5, 2020")

Les dates sans fuseau sont interprétées en UTC.
"""

import math
import re
from datetime import datetime, timezone
from typing import Any, Optional

_NUMERIC_RE = re.compile(r"^[+-]?\d+(\.\d+)?$")

# Paliers de conversion : on divise tant que la valeur dépasse le palier
_STEPS = (
    (60, "second"),
    (60, "minute"),
    (24, "hour"),
    (7, "day"),
    (4.34524, "week"),
    (12, "month"),
    (math.inf, "year"),
)

# Formes idiomatiques pour les valeurs proches (équivalent numeric="auto")
_AUTO_PHRASES = {
    ("second", 0): "now",
    ("minute", 0): "this minute",
    ("hour", 0): "this hour",
    ("day", -1): "yesterday",
    ("day", 0): "today",
    ("day", 1): "tomorrow",
    ("week", -1): "last week",
    ("week", 0): "this week",
    ("week", 1): "next week",
    ("month", -1): "last month",
    ("month", 0): "this month",
    ("month", 1): "next month",
    ("year", -1): "last year",
    ("year", 0): "this year",
    ("year", 1): "next year",
}


def parse_date(value: Any) -> Optional[datetime]:
    """
    Convertit une valeur date-like en datetime UTC.

    Accepte un datetime, un nombre ou une chaîne numérique (epoch en
    millisecondes), ou une chaîne ISO 8601 (date seule ou date + heure).

    Returns:
        datetime avec fuseau UTC, ou None si la valeur est absente ou invalide
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = _from_epoch_ms(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        if _NUMERIC_RE.match(text):
            parsed = _from_epoch_ms(float(text))
        else:
            try:
                parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
            except ValueError:
                return None

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _from_epoch_ms(value: float) -> Optional[datetime]:
    """Convertit un epoch en millisecondes, None si hors limites."""
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def sort_timestamp(value: Any) -> float:
    """Retourne le timestamp de la date, -inf si elle est absente ou invalide."""
    parsed = parse_date(value)
    if parsed is None:
        return -math.inf
    return parsed.timestamp()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_relative(amount: int, unit: str) -> str:
    phrase = _AUTO_PHRASES.get((unit, amount))
    if phrase:
        return phrase
    count = abs(amount)
    label = unit if count == 1 else f"{unit}s"
    if amount < 0:
        return f"{count} {label} ago"
    return f"in {count} {label}"


def time_ago(value: Any, now: Optional[datetime] = None) -> str:
    """
    Formate l'écart entre la date et maintenant ("2 weeks ago", "yesterday").

    Args:
        value: Date-like à formater
        now: Instant de référence (défaut : maintenant, UTC)

    Returns:
        Libellé relatif, ou chaîne vide si la date est invalide
    """
    parsed = parse_date(value)
    if parsed is None:
        return ""
    reference = parse_date(now) if now is not None else datetime.now(timezone.utc)

    elapsed: float = math.floor((reference - parsed).total_seconds())
    for threshold, unit in _STEPS:
        if abs(elapsed) < threshold:
            return _format_relative(_round_half_up(-elapsed), unit)
        elapsed /= threshold
    return ""


def format_date(value: Any) -> str:
    """Formate la date en toutes lettres ("January 5, 2020"), chaîne vide si invalide."""
    parsed = parse_date(value)
    if parsed is None:
        return ""
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"
