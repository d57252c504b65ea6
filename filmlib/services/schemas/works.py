# filmlib/services/schemas/works.py
from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from filmlib.services.schemas.performers import PerformerRead

RATING_MAX = 10


class WorkCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    release_date: Optional[date] = None
    rating: int = Field(0, ge=0, le=RATING_MAX)
    performer_ids: List[UUID] = Field(default_factory=list)


class WorkPatch(BaseModel):
    """
    Sparse update. A field left out (or sent as its zero value) is kept;
    a non-empty performer_ids list replaces the whole credit list.
    """
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    release_date: Optional[date] = None
    rating: Optional[int] = Field(default=None, ge=0, le=RATING_MAX)
    performer_ids: Optional[List[UUID]] = None


class WorkRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str = ""
    release_date: Optional[date] = None
    rating: int = 0
    performers: List[PerformerRead] = []
