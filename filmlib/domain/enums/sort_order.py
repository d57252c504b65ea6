from __future__ import annotations
from enum import IntEnum, StrEnum


class SortMode(IntEnum):
    """Wire values accepted by the work listing endpoint."""
    title = 1
    release_date = 2
    rating = 3


class SortOrder(StrEnum):
    title_asc = "title_asc"
    release_date_desc = "release_date_desc"
    rating_desc = "rating_desc"
