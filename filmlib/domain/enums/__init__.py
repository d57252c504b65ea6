from filmlib.domain.enums.gender import Gender
from filmlib.domain.enums.role import Role
from filmlib.domain.enums.sort_order import SortMode, SortOrder

__all__ = [
    "Gender",
    "Role",
    "SortMode",
    "SortOrder",
]
