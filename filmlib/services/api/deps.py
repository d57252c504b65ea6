# filmlib/services/api/deps.py
from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from filmlib.database.core.main import SessionLocal
from filmlib.database.repos.account_repo import SqlAlchemyAccountRepo
from filmlib.database.repos.performer_repo import SqlAlchemyPerformerRepo
from filmlib.database.repos.work_repo import SqlAlchemyWorkRepo
from filmlib.domain.enums import Role
from filmlib.domain.ports.hashing import PasswordHasherPort
from filmlib.services.auth.passwords import Argon2PasswordHasher
from filmlib.services.auth.role_gate import RoleGate
from filmlib.services.auth.tokens import TokenValidator, get_token_validator
from filmlib.services.catalog.account_service import AccountService
from filmlib.services.catalog.performer_service import PerformerService
from filmlib.services.catalog.work_service import WorkService

# Route-level admission. Declared once and shared by every router.
require_admin = RoleGate({Role.admin})
require_reader = RoleGate({Role.admin, Role.user})


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Repos that call `transactional()` on this
    session join it instead of opening their own.

    COMMIT on normal exit, ROLLBACK if an exception bubbles out. Service
    factories depend on it with scope="function" so the commit finishes
    before the response is sent.
    """
    with db.begin():
        yield db


def get_password_hasher() -> PasswordHasherPort:
    return Argon2PasswordHasher()


def get_performer_service(db: Session = Depends(transactional_session, scope="function")) -> PerformerService:
    return PerformerService(SqlAlchemyPerformerRepo(db))


def get_work_service(db: Session = Depends(transactional_session, scope="function")) -> WorkService:
    return WorkService(SqlAlchemyWorkRepo(db))


def get_account_service(
    db: Session = Depends(transactional_session, scope="function"),
    hasher: PasswordHasherPort = Depends(get_password_hasher),
    tokens: TokenValidator = Depends(get_token_validator),
) -> AccountService:
    return AccountService(SqlAlchemyAccountRepo(db), hasher, tokens)
