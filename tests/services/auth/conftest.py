# tests/services/auth/conftest.py
from __future__ import annotations

import pytest

from filmlib.services.auth.tokens import TokenValidator


@pytest.fixture()
def secret() -> str:
    return "unit-test-signing-secret-0123456789abcdef"


@pytest.fixture()
def validator(secret) -> TokenValidator:
    return TokenValidator(secret)
