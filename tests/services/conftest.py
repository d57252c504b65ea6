# tests/services/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.orm import sessionmaker
from starlette.testclient import TestClient

from filmlib.domain.enums import Role
from filmlib.services.api.app import create_app
from filmlib.services.api.deps import get_db
from filmlib.services.auth.tokens import TokenValidator, get_token_validator

API_SECRET = "api-test-signing-secret-0123456789abcdefgh"


@pytest.fixture()
def api_tokens() -> TokenValidator:
    return TokenValidator(API_SECRET)


@pytest.fixture()
def api_client(db_engine, api_tokens):
    """
    A TestClient whose `get_db` dependency hands out sessions on the per-test
    engine. Each request still runs in its own transaction through
    `transactional_session`, exactly as in production, and the tables are
    dropped with the engine afterwards.
    """
    TestSession = sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False, future=True)
    app = create_app()

    def _override_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_db
    app.dependency_overrides[get_token_validator] = lambda: api_tokens

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def bearer(api_tokens):
    """bearer(Role.admin) -> headers carrying a fresh token for that role."""
    def _headers(role: Role | str, subject: str = "tester") -> dict:
        return {"Authorization": f"Bearer {api_tokens.issue(subject=subject, role=role)}"}
    return _headers


@pytest.fixture()
def admin(bearer) -> dict:
    return bearer(Role.admin, "admin")


@pytest.fixture()
def reader(bearer) -> dict:
    return bearer(Role.user, "reader")
