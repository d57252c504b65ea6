# filmlib/services/mappers/performer.py
from __future__ import annotations

from filmlib.domain.entities.performer import Performer
from filmlib.services.schemas.performers import PerformerCreate, PerformerPatch


def to_domain_from_create(s: PerformerCreate) -> Performer:
    return Performer(name=s.name.strip(), gender=s.gender, birth_date=s.birth_date)


def to_domain_from_patch(p: PerformerPatch) -> Performer:
    """Sparse performer: unset fields stay at their zero value and are ignored by the merge."""
    return Performer(
        name=(p.name or "").strip(),
        gender=p.gender,
        birth_date=p.birth_date,
    )
