# filmlib/domain/policies/row_aggregation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, List, Mapping, TypeVar

P = TypeVar("P")
C = TypeVar("C")

Row = Mapping[str, Any]


@dataclass(frozen=True)
class JoinShape(Generic[P, C]):
    """
    Describes one side of a join result as "parent" and the other as "child".

    parent_key / child_key name the key columns in each row. A row whose
    child_key value is None came out of an outer join with no match.
    """
    parent_key: str
    child_key: str
    make_parent: Callable[[Row], P]
    make_child: Callable[[Row], C]
    add_child: Callable[[P, C], None]


def aggregate_rows(rows: Iterable[Row], shape: JoinShape[P, C]) -> List[P]:
    """
    Fold flat join rows into parents holding their children.

    - parents come out in order of first appearance of their key
    - every row with a child appends that child; children are NOT
      deduplicated, a repeated child row shows up twice
    - a row without a child still yields its parent (zero children)

    Pure and deterministic for a given row order; `rows` may be a stream.
    """
    parents: dict[Hashable, P] = {}
    ordered: List[P] = []

    for row in rows:
        key = row[shape.parent_key]
        parent = parents.get(key)
        if parent is None:
            parent = shape.make_parent(row)
            parents[key] = parent
            ordered.append(parent)

        if row[shape.child_key] is not None:
            shape.add_child(parent, shape.make_child(row))

    return ordered
