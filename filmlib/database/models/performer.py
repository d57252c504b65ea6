# filmlib/database/models/performer.py
from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, String, Enum as SAEnum, Index
from sqlalchemy.orm import Mapped, mapped_column

from filmlib.database.core.main import Base
from filmlib.database.core.service_object import ServiceObject
from filmlib.domain.enums import Gender


class Performer(ServiceObject, Base):
    __tablename__ = "performers"
    __table_args__ = (
        Index("ix_performers_name", "name"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    gender: Mapped[Optional[Gender]] = mapped_column(
        SAEnum(Gender, name="performer_gender", native_enum=False, length=16),
        nullable=True,
    )
    birth_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"<Performer id={self.id} name={self.name!r}>"
