from __future__ import annotations
from enum import StrEnum
from typing import Any


class Role(StrEnum):
    admin = "admin"
    user = "user"
    # Never stored; stands in for any claim value that is not a known tier.
    unrecognized = "unrecognized"

    @classmethod
    def parse(cls, value: Any) -> "Role":
        if isinstance(value, str) and value in (cls.admin.value, cls.user.value):
            return cls(value)
        return cls.unrecognized
