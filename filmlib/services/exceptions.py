"""
Custom exceptions for the service layer.

Provides specific exception types for catalog, account and authorization
failures that routers translate to HTTP responses.
"""

from enum import StrEnum
from typing import Any, Optional


class CatalogError(Exception):
    """Base exception for service layer errors."""
    pass


class ValidationError(CatalogError):
    """Raised when input is rejected before any storage access."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class ConflictError(CatalogError):
    """Raised when a unique field is already taken."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StorageError(CatalogError):
    """Raised when the storage collaborator fails or returns nothing usable."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(StorageError):
    """
    Raised when a requested entity is absent.

    Subclasses StorageError so callers that only handle the generic storage
    class keep seeing a single failure path.
    """

    def __init__(self, resource: str, identifier: Any):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} {identifier} not found")


class InvalidCredentials(CatalogError):
    """Raised on login with an unknown username or a wrong password."""

    def __init__(self, message: str = "invalid username or password"):
        self.message = message
        super().__init__(message)


# ---------------------------------------------------------------------------
# Tokens and request admission
# ---------------------------------------------------------------------------

class RejectReason(StrEnum):
    malformed = "malformed"
    bad_signature = "bad_signature"
    expired = "expired"


class TokenRejected(CatalogError):
    """Raised by the token validator; `reason` says which check failed."""

    def __init__(self, reason: RejectReason):
        self.reason = reason
        super().__init__(f"token rejected: {reason.value}")


class GateRejection(CatalogError):
    """Base class for role gate outcomes other than admission."""
    pass


class Unauthenticated(GateRejection):
    """
    No usable credential: header missing, token rejected, or role claim
    absent/unrecognized. `reason` is "missing", "unrecognized_role" or a
    RejectReason value.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"unauthenticated: {reason}")


class MalformedAuthHeader(GateRejection):
    """The Authorization header is not of the form `Bearer <token>`."""

    def __init__(self, header: str):
        # keep only the shape; the value may contain a secret
        self.parts = len(header.split())
        super().__init__("invalid authorization header")


class Forbidden(GateRejection):
    """The credential is valid but its role is not admitted by the gate."""

    def __init__(self, role: str, required: frozenset):
        self.role = role
        self.required = required
        super().__init__(f"role {role!r} not in {sorted(required)}")
