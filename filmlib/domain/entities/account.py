# filmlib/domain/entities/account.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from filmlib.domain.enums.role import Role


@dataclass
class Account:
    id: Optional[UUID] = None
    username: str = ""
    password_hash: str = ""  # salted one-way hash, never the raw password
    role: Role = Role.user


@dataclass(frozen=True)
class Credential:
    """Claims carried inside a signed bearer token. Recomputed on every login."""
    role: Role
    subject: Optional[str]
    expires_at: datetime
