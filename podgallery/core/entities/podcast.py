"""
Podcast display entities.

Entities produced by the normalizer from the raw catalog data and served
by the podcast repository to the gallery and detail views.
"""

from dataclasses import dataclass
from typing import Optional, Union

# Date-like value as found in the raw catalog: ISO string or epoch milliseconds
DateLike = Union[str, int, float]


@dataclass(frozen=True)
class SeasonDetail:
    """
    One season of a podcast, as listed in the detail overlay.

    Attributes:
        title: Season title (e.g. "Season 1")
        episodes: Number of episodes in the season (never negative)
    """

    title: str = ""
    episodes: int = 0


@dataclass(frozen=True)
class DisplayRecord:
    """
    Normalized podcast summary used for querying and rendering.

    Records are immutable once normalized: the repository only builds new
    ordered views of them.

    Attributes:
        id: Stable identifier, unique across the catalog
        title: Display title (may be empty, the preview shows a placeholder)
        description: Long description, empty string when not provided
        genres: Genre names in catalog order (unknown genre ids are dropped)
        seasons_count: Number of seasons
        updated_at: Last update date (ISO string or epoch milliseconds)
        popularity: Popularity rank, higher is more popular
    """

    id: str
    title: str = ""
    description: str = ""
    genres: tuple[str, ...] = ()
    seasons_count: int = 0
    updated_at: Optional[DateLike] = None
    popularity: int = 0
