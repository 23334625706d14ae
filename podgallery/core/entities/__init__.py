"""
Business entities representing core domain concepts.

Exports:
- DisplayRecord: Normalized podcast summary
- SeasonDetail: One season of a podcast
"""

from podgallery.core.entities.podcast import DateLike, DisplayRecord, SeasonDetail

__all__ = [
    "DateLike",
    "DisplayRecord",
    "SeasonDetail",
]
