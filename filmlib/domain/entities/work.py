# filmlib/domain/entities/work.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional
from uuid import UUID

from filmlib.domain.entities.performer import Performer
from filmlib.domain.entities.links.work_performer_link import WorkPerformerLink


@dataclass
class Work:
    """
    A titled work together with the performers credited on it.

    `performers` holds value snapshots taken at read time, not live
    references. On writes only their ids matter.
    """
    id: Optional[UUID] = None
    title: str = ""
    description: str = ""
    release_date: Optional[date] = None
    rating: int = 0
    performers: List[Performer] = field(default_factory=list)

    def __post_init__(self):
        if self.rating is not None and self.rating < 0:
            raise ValueError("rating must be >= 0")

    def links(self) -> List[WorkPerformerLink]:
        if self.id is None:
            raise ValueError("Work has no id yet")
        return [WorkPerformerLink(work_id=self.id, performer_id=p.id) for p in self.performers]


# A work always travels with its performers; the name exists for symmetry
# with PerformerWithWorks.
WorkWithPerformers = Work
