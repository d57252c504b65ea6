# filmlib/services/schemas/accounts.py
from __future__ import annotations

from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from filmlib.domain.enums import Role


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class TokenRead(BaseModel):
    token: str


class AccountCreate(BaseModel):
    """Admin-only account creation with an explicit role."""
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    role: Literal["admin", "user"] = "user"


class AccountRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    role: Role
