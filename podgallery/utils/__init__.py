"""
Utilitaires partagés de PodGallery.

Ce module contient les conversions tolérantes et le formatage des dates.
"""

from podgallery.utils.helpers import coerce_count, join_list, split_list
from podgallery.utils.time_format import format_date, parse_date, sort_timestamp, time_ago

__all__ = [
    "coerce_count",
    "format_date",
    "join_list",
    "parse_date",
    "sort_timestamp",
    "split_list",
    "time_ago",
]
