# filmlib/services/catalog/account_service.py
from __future__ import annotations

import uuid

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from filmlib.common.logging import get_logger
from filmlib.domain.entities.account import Account
from filmlib.domain.enums.role import Role
from filmlib.domain.ports.hashing import PasswordHasherPort
from filmlib.domain.ports.storage import AccountStore
from filmlib.services.auth.tokens import TokenValidator
from filmlib.services.catalog.utils import storage_errors
from filmlib.services.exceptions import ConflictError, InvalidCredentials, StorageError, ValidationError

logger = get_logger(__name__)


class AccountService:
    """
    Registration and login.

    Username uniqueness is checked before the insert. The check and the
    insert are not atomic, so two concurrent registrations of one name can
    both pass the check; the unique index on accounts.username then rejects
    the second insert, which is reported as the same ConflictError.
    """

    def __init__(self, store: AccountStore, hasher: PasswordHasherPort, tokens: TokenValidator) -> None:
        self.store = store
        self.hasher = hasher
        self.tokens = tokens

    def register(self, username: str, password: str, role: Role = Role.user) -> Account:
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("username and password are required")
        if role is Role.unrecognized:
            raise ValidationError("role must be admin or user", field="role")

        with storage_errors("check username"):
            taken = self.store.exists(username)
        if taken:
            raise ConflictError(f"username {username!r} is already taken")

        account = Account(
            id=uuid.uuid4(),
            username=username,
            password_hash=self.hasher.hash(password),
            role=role,
        )
        try:
            created = self.store.create(account)
        except IntegrityError as exc:
            raise ConflictError(f"username {username!r} is already taken") from exc
        except SQLAlchemyError as exc:
            raise StorageError("failed to create account") from exc
        logger.info("registered account %s with role %s", created.username, created.role)
        return created

    def login(self, username: str, password: str) -> str:
        """Return a freshly signed bearer token for valid credentials."""
        with storage_errors("load account"):
            account = self.store.get_by_username((username or "").strip())
        if account is None or not self.hasher.verify(password or "", account.password_hash):
            raise InvalidCredentials()
        logger.info("login for %s", account.username)
        return self.tokens.issue(subject=account.username, role=account.role)
