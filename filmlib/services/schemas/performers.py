# filmlib/services/schemas/performers.py
from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from filmlib.domain.enums import Gender


class PerformerBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    gender: Optional[Gender] = None
    birth_date: Optional[date] = None


class PerformerCreate(PerformerBase):
    pass


class PerformerPatch(BaseModel):
    """Omitted (or empty) fields keep their stored value."""
    name: Optional[str] = Field(default=None, max_length=255)
    gender: Optional[Gender] = None
    birth_date: Optional[date] = None


class PerformerRead(PerformerBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID


# ---------- Performer with credited works ----------

class WorkBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str = ""
    release_date: Optional[date] = None
    rating: int = 0


class PerformerWithWorksRead(PerformerRead):
    works: List[WorkBrief] = []
