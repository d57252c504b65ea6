# filmlib/services/auth/role_gate.py

from typing import Iterable, Optional

from fastapi import Depends, Header

from filmlib.common.logging import get_logger
from filmlib.domain.entities.account import Credential
from filmlib.domain.enums.role import Role
from filmlib.services.auth.tokens import TokenValidator, get_token_validator
from filmlib.services.exceptions import Forbidden, MalformedAuthHeader, TokenRejected, Unauthenticated

logger = get_logger(__name__)

BEARER = "bearer"


class RoleGate:
    """
    Request admission by role.

    Checks run in a fixed order and the first failure wins:
      1. no Authorization header            -> Unauthenticated("missing")
      2. header is not "Bearer <token>"     -> MalformedAuthHeader
      3. token rejected by the validator    -> Unauthenticated(<reject reason>)
      4. role claim missing or unknown      -> Unauthenticated("unrecognized_role")
      5. role not in the required set       -> Forbidden
    Nothing is remembered between calls.

    Instances are FastAPI dependencies:
        router = APIRouter(dependencies=[Depends(RoleGate({Role.admin}))])
    """

    def __init__(self, required: Iterable[Role]) -> None:
        roles = frozenset(Role(r) for r in required)
        if not roles:
            raise ValueError("a role gate needs at least one admitted role")
        if Role.unrecognized in roles:
            raise ValueError("Role.unrecognized cannot be admitted")
        self.required = roles

    def admit(self, authorization: Optional[str], validator: TokenValidator) -> Credential:
        if not authorization:
            raise Unauthenticated("missing")

        parts = authorization.split()
        if len(parts) != 2 or parts[0].lower() != BEARER:
            raise MalformedAuthHeader(authorization)

        try:
            credential = validator.validate(parts[1])
        except TokenRejected as exc:
            raise Unauthenticated(exc.reason.value) from exc

        if credential.role is Role.unrecognized:
            raise Unauthenticated("unrecognized_role")

        if credential.role not in self.required:
            raise Forbidden(credential.role.value, self.required)

        return credential

    def __call__(
        self,
        authorization: Optional[str] = Header(None, alias="Authorization"),
        validator: TokenValidator = Depends(get_token_validator),
    ) -> Credential:
        try:
            return self.admit(authorization, validator)
        except (Unauthenticated, MalformedAuthHeader, Forbidden) as exc:
            logger.warning("request rejected by role gate %s: %s", sorted(self.required), exc)
            raise

    def __repr__(self) -> str:
        return f"RoleGate({sorted(r.value for r in self.required)})"
