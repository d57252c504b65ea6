# filmlib/domain/entities/performer.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, TYPE_CHECKING
from uuid import UUID

from filmlib.domain.enums.gender import Gender

if TYPE_CHECKING:
    from filmlib.domain.entities.work import Work


@dataclass
class Performer:
    """
    A credited person. Owned independently; works only reference it.

    Every field defaults to its zero value so a sparse instance can carry
    a partial update (see domain.policies.partial_merge).
    """
    id: Optional[UUID] = None
    name: str = ""
    gender: Optional[Gender] = None
    birth_date: Optional[date] = None


@dataclass
class PerformerWithWorks(Performer):
    """Read model built by the row aggregator; never persisted."""
    works: List["Work"] = field(default_factory=list)
