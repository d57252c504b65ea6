import pytest

from filmlib.domain.enums import Role


@pytest.mark.parametrize("raw, expected", [("admin", Role.admin), ("user", Role.user)])
def test_known_tiers(raw, expected):
    assert Role.parse(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "Admin", "root", "unrecognized", 1, ["admin"]])
def test_anything_else_is_unrecognized(raw):
    assert Role.parse(raw) is Role.unrecognized
