from filmlib.services.schemas.performers import (
    PerformerCreate,
    PerformerPatch,
    PerformerRead,
    PerformerWithWorksRead,
    WorkBrief,
)
from filmlib.services.schemas.works import (
    WorkCreate,
    WorkPatch,
    WorkRead,
)
from filmlib.services.schemas.accounts import (
    AccountCreate,
    AccountRead,
    LoginRequest,
    TokenRead,
)

__all__ = [
    "PerformerCreate",
    "PerformerPatch",
    "PerformerRead",
    "PerformerWithWorksRead",
    "WorkBrief",
    "WorkCreate",
    "WorkPatch",
    "WorkRead",
    "AccountCreate",
    "AccountRead",
    "LoginRequest",
    "TokenRead",
]
