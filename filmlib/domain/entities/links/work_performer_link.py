# filmlib/domain/entities/links/work_performer_link.py
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class WorkPerformerLink:
    """
    Join entity connecting a Work and a Performer. Carries no attributes of
    its own; removed together with the work, never with the performer.
    """
    work_id: UUID
    performer_id: UUID
