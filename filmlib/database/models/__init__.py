# filmlib/database/models/__init__.py

from filmlib.database.core.main import Base
from filmlib.database.models.performer import Performer
from filmlib.database.models.work import Work, WorkPerformer
from filmlib.database.models.account import Account

__all__ = [
    "Base",
    "Performer",
    "Work",
    "WorkPerformer",
    "Account",
]
