from __future__ import annotations
from enum import StrEnum

class Gender(StrEnum):
    male = "male"
    female = "female"
    other = "other"
