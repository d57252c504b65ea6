# filmlib/database/models/work.py
from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID as UUID_t

from sqlalchemy import Date, ForeignKey, Integer, String, Text, Uuid, CheckConstraint, Index, text
from sqlalchemy.orm import Mapped, mapped_column

from filmlib.database.core.main import Base
from filmlib.database.core.service_object import ServiceObject


class Work(ServiceObject, Base):
    __tablename__ = "works"
    __table_args__ = (
        CheckConstraint("rating >= 0", name="rating_non_negative"),
        Index("ix_works_title", "title"),
        Index("ix_works_release_date", "release_date"),
        Index("ix_works_rating", "rating"),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))
    release_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))

    def __repr__(self) -> str:
        return f"<Work id={self.id} title={self.title!r}>"


class WorkPerformer(Base):
    """
    Association table for Work <-> Performer. A pure link: no attributes.
    Removed with the work. Deleting a performer leaves its links behind, so
    performer_id carries no foreign key; reads join performers and skip
    links whose performer is gone.
    """
    __tablename__ = "work_performer"
    __table_args__ = (
        Index("ix_work_performer_performer_id", "performer_id"),
    )

    work_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("works.id"),
        primary_key=True,
    )
    performer_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
    )
