# filmlib/services/api/routers/accounts.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends, Form

from filmlib.common.settings import get_settings
from filmlib.domain.enums import Role
from filmlib.services.api.deps import get_account_service, require_admin
from filmlib.services.catalog.account_service import AccountService
from filmlib.services.schemas.accounts import AccountCreate, AccountRead, LoginRequest, TokenRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/accounts", tags=["accounts"])


@router.post("/register", response_model=AccountRead, status_code=HTTPStatus.CREATED)
def register(
    username: str = Form(...),
    password: str = Form(...),
    svc: AccountService = Depends(get_account_service),
) -> AccountRead:
    """Self-service sign-up. The role is always the configured default."""
    role = Role.parse(cfg.auth.default_role)
    return AccountRead.model_validate(svc.register(username, password, role=role))


@router.post("/login", response_model=TokenRead)
def login(
    payload: LoginRequest,
    svc: AccountService = Depends(get_account_service),
) -> TokenRead:
    return TokenRead(token=svc.login(payload.username, payload.password))


@router.post(
    "",
    response_model=AccountRead,
    status_code=HTTPStatus.CREATED,
    dependencies=[Depends(require_admin)],
)
def create_account(
    payload: AccountCreate,
    svc: AccountService = Depends(get_account_service),
) -> AccountRead:
    return AccountRead.model_validate(svc.register(payload.username, payload.password, role=Role(payload.role)))
