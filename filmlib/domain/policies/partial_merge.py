# filmlib/domain/policies/partial_merge.py
from __future__ import annotations

from dataclasses import fields, replace
from typing import Any, Collection, TypeVar

T = TypeVar("T")

# Identity is assigned once at creation; a merge never touches it.
_IMMUTABLE = frozenset({"id"})


def is_zero(value: Any) -> bool:
    """None, "", 0 and empty collections count as "not supplied"."""
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (str, int, float)):
        return not value
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def merge_partial(existing: T, incoming: T, *, wholesale: Collection[str] = ()) -> T:
    """
    PATCH-style merge of two instances of the same dataclass.

    Field by field, a zero value on `incoming` keeps the existing value and
    anything else replaces it. Fields named in `wholesale` are collections
    swapped as a whole (never merged element-wise) when supplied non-empty.

    A field can't be cleared through this; an empty incoming value always
    means "keep".
    """
    if type(existing) is not type(incoming):
        raise TypeError(f"cannot merge {type(incoming).__name__} onto {type(existing).__name__}")

    changes: dict[str, Any] = {}
    for f in fields(existing):  # type: ignore[arg-type]
        if f.name in _IMMUTABLE or not f.init:
            continue
        value = getattr(incoming, f.name)
        if is_zero(value):
            continue
        changes[f.name] = list(value) if f.name in wholesale else value

    return replace(existing, **changes)  # type: ignore[type-var]
