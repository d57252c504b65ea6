# filmlib/services/auth/tokens.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import jwt

from filmlib.common.settings import get_settings
from filmlib.domain.entities.account import Credential
from filmlib.domain.enums.role import Role
from filmlib.services.exceptions import RejectReason, TokenRejected

CLAIM_ROLE = "role"
CLAIM_SUB = "sub"
CLAIM_EXP = "exp"
CLAIM_IAT = "iat"


class TokenValidator:
    """
    Issues and verifies HMAC-signed bearer tokens.

    The secret is fixed when the instance is built and never changes
    afterwards; build one per process via get_token_validator().
    """

    def __init__(self, secret: str, *, algorithm: str = "HS256", ttl: timedelta = timedelta(hours=72)) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, *, subject: str, role: Role | str, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            CLAIM_ROLE: str(role),
            CLAIM_SUB: subject,
            CLAIM_IAT: int(now.timestamp()),
            CLAIM_EXP: int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def validate(self, token: str) -> Credential:
        """
        Check signature and expiry, then return the claims.

        Raises TokenRejected with reason malformed, bad_signature or expired.
        The role claim is not judged here: a missing or unknown role comes
        back as Role.unrecognized and the caller decides.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": [CLAIM_EXP]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenRejected(RejectReason.expired) from exc
        except jwt.InvalidSignatureError as exc:
            raise TokenRejected(RejectReason.bad_signature) from exc
        except jwt.InvalidTokenError as exc:
            raise TokenRejected(RejectReason.malformed) from exc

        subject = payload.get(CLAIM_SUB)
        return Credential(
            role=Role.parse(payload.get(CLAIM_ROLE)),
            subject=str(subject) if subject is not None else None,
            expires_at=datetime.fromtimestamp(int(payload[CLAIM_EXP]), tz=timezone.utc),
        )


@lru_cache(maxsize=1)
def get_token_validator() -> TokenValidator:
    """Process-wide validator, built once from Settings.auth."""
    auth = get_settings().auth
    return TokenValidator(auth.jwt_secret, algorithm=auth.jwt_algo, ttl=timedelta(hours=auth.token_ttl_hours))
