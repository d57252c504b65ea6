# filmlib/database/repos/account_repo.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import select, exists
from sqlalchemy.orm import Session

from filmlib.database.models import Account as DBAccount
from filmlib.database.repos._mapping import to_domain_account
from filmlib.domain.entities.account import Account


class SqlAlchemyAccountRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def create(self, account: Account) -> Account:
        row = DBAccount(
            id=account.id,
            username=account.username,
            password_hash=account.password_hash,
            role=account.role,
        )
        self.db.add(row)
        # flush now so a duplicate username surfaces here as IntegrityError
        self.db.flush()
        return to_domain_account(row)

    def exists(self, username: str) -> bool:
        return bool(self.db.execute(select(exists().where(DBAccount.username == username))).scalar())

    def get_by_username(self, username: str) -> Optional[Account]:
        row = self.db.execute(
            select(DBAccount).where(DBAccount.username == username).limit(1)
        ).scalars().first()
        return to_domain_account(row) if row else None
