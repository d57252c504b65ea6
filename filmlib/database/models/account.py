# filmlib/database/models/account.py
from __future__ import annotations

from sqlalchemy import String, Enum as SAEnum, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from filmlib.database.core.main import Base
from filmlib.database.core.service_object import ServiceObject
from filmlib.domain.enums import Role


class Account(ServiceObject, Base):
    __tablename__ = "accounts"
    __table_args__ = (
        UniqueConstraint("username", name="uq_accounts_username"),
    )

    username: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(
        SAEnum(Role, name="account_role", native_enum=False, length=16),
        nullable=False,
        server_default=text("'user'"),
    )

    def __repr__(self) -> str:
        return f"<Account id={self.id} username={self.username!r} role={self.role}>"
