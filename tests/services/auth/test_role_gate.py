from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from filmlib.domain.enums import Role
from filmlib.services.auth.role_gate import RoleGate
from filmlib.services.auth.tokens import TokenValidator
from filmlib.services.exceptions import Forbidden, MalformedAuthHeader, Unauthenticated

admin_only = RoleGate({Role.admin})
readers = RoleGate({Role.admin, Role.user})


def _bearer(validator: TokenValidator, role, **kw) -> str:
    return f"Bearer {validator.issue(subject='someone', role=role, **kw)}"


@pytest.mark.parametrize(
    "gate, role",
    [(admin_only, Role.admin), (readers, Role.admin), (readers, Role.user)],
)
def test_admitted(validator, gate, role):
    cred = gate.admit(_bearer(validator, role), validator)
    assert cred.role is role


def test_user_forbidden_on_admin_gate(validator):
    with pytest.raises(Forbidden) as ei:
        admin_only.admit(_bearer(validator, Role.user), validator)
    assert ei.value.role == "user"


@pytest.mark.parametrize("header", [None, ""])
def test_missing_header(validator, header):
    with pytest.raises(Unauthenticated) as ei:
        admin_only.admit(header, validator)
    assert ei.value.reason == "missing"


@pytest.mark.parametrize("header", ["Bearer", "Bearer a b", "Token abc", "abc", "Basic dXNlcjpwYXNz"])
def test_malformed_header(validator, header):
    with pytest.raises(MalformedAuthHeader):
        readers.admit(header, validator)


def test_scheme_is_case_insensitive(validator):
    token = validator.issue(subject="x", role=Role.user)
    assert readers.admit(f"bearer {token}", validator).role is Role.user


@pytest.mark.parametrize(
    "make_token, reason",
    [
        (lambda v: "not-a-jwt", "malformed"),
        (lambda v: TokenValidator("another-secret-of-reasonable-length!!").issue(subject="x", role="admin"), "bad_signature"),
        (lambda v: v.issue(subject="x", role="admin", now=datetime.now(timezone.utc) - timedelta(days=10)), "expired"),
    ],
)
def test_rejected_token_is_unauthenticated(validator, make_token, reason):
    with pytest.raises(Unauthenticated) as ei:
        admin_only.admit(f"Bearer {make_token(validator)}", validator)
    assert ei.value.reason == reason


@pytest.mark.parametrize("role_claim", [None, "superuser", ""])
def test_unrecognized_role_is_unauthenticated_not_forbidden(validator, secret, role_claim):
    exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())
    claims = {"exp": exp, "sub": "x"}
    if role_claim is not None:
        claims["role"] = role_claim
    token = jwt.encode(claims, secret, algorithm="HS256")

    with pytest.raises(Unauthenticated) as ei:
        readers.admit(f"Bearer {token}", validator)
    assert ei.value.reason == "unrecognized_role"


def test_header_shape_checked_before_token(validator):
    # An expired token in a malformed header still reports the header.
    stale = validator.issue(subject="x", role="admin", now=datetime.now(timezone.utc) - timedelta(days=10))
    with pytest.raises(MalformedAuthHeader):
        admin_only.admit(f"Token {stale}", validator)


def test_same_input_same_outcome(validator):
    header = _bearer(validator, Role.user)
    for _ in range(3):
        with pytest.raises(Forbidden):
            admin_only.admit(header, validator)
        assert readers.admit(header, validator).role is Role.user


@pytest.mark.parametrize("required", [set(), {Role.unrecognized}])
def test_gate_construction_rejects_bad_role_sets(required):
    with pytest.raises(ValueError):
        RoleGate(required)


def test_malformed_header_does_not_keep_the_value():
    exc = MalformedAuthHeader("Token super-secret-value")
    assert "super-secret-value" not in str(exc)
    assert exc.parts == 2


def test_admin_forbidden_on_user_only_gate(validator):
    with pytest.raises(Forbidden):
        RoleGate({Role.user}).admit(_bearer(validator, Role.admin), validator)
