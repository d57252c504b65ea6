from __future__ import annotations

from filmlib.domain.enums.sort_order import SortMode, SortOrder


def select_sort_order(mode: int) -> SortOrder:
    """
    Map the wire sort mode onto a storage ordering.

    1 -> title ascending, 2 -> release date descending. Every other value
    (3, 0, negatives, anything unknown) falls through to rating descending.
    """
    if mode == SortMode.title:
        return SortOrder.title_asc
    if mode == SortMode.release_date:
        return SortOrder.release_date_desc
    return SortOrder.rating_desc
