# filmlib/services/mappers/work.py
from __future__ import annotations

from typing import Iterable, List
from uuid import UUID

from filmlib.domain.entities.performer import Performer
from filmlib.domain.entities.work import Work
from filmlib.services.schemas.works import WorkCreate, WorkPatch


def _performer_refs(ids: Iterable[UUID] | None) -> List[Performer]:
    # only the id of a referenced performer is used on writes
    return [Performer(id=pid) for pid in (ids or [])]


def to_domain_from_create(s: WorkCreate) -> Work:
    return Work(
        title=s.title.strip(),
        description=s.description,
        release_date=s.release_date,
        rating=s.rating,
        performers=_performer_refs(s.performer_ids),
    )


def to_domain_from_patch(p: WorkPatch) -> Work:
    return Work(
        title=(p.title or "").strip(),
        description=p.description or "",
        release_date=p.release_date,
        rating=p.rating or 0,
        performers=_performer_refs(p.performer_ids),
    )
