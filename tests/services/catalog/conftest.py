# tests/services/catalog/conftest.py
from __future__ import annotations

import copy
from typing import Dict, Iterable, List, Optional
from uuid import UUID

import pytest
from sqlalchemy.exc import OperationalError

from filmlib.domain.entities.account import Account
from filmlib.domain.entities.performer import Performer, PerformerWithWorks
from filmlib.domain.entities.work import Work
from filmlib.domain.enums import SortOrder
from filmlib.services.auth.tokens import TokenValidator


class FakePerformerStore:
    def __init__(self) -> None:
        self.rows: Dict[UUID, Performer] = {}

    def create(self, performer: Performer) -> Performer:
        self.rows[performer.id] = copy.deepcopy(performer)
        return copy.deepcopy(performer)

    def get(self, performer_id: UUID) -> Optional[Performer]:
        found = self.rows.get(performer_id)
        return copy.deepcopy(found) if found else None

    def update(self, performer: Performer) -> Performer:
        self.rows[performer.id] = copy.deepcopy(performer)
        return copy.deepcopy(performer)

    def delete(self, performer_id: UUID) -> bool:
        return self.rows.pop(performer_id, None) is not None

    def list_with_works(self) -> List[PerformerWithWorks]:
        return [PerformerWithWorks(**vars(p)) for p in self.rows.values()]


class FakeWorkStore:
    def __init__(self, performers: FakePerformerStore) -> None:
        self.performers = performers
        self.rows: Dict[UUID, Work] = {}
        self.last_order: Optional[SortOrder] = None

    def create(self, work: Work) -> Work:
        self.rows[work.id] = copy.deepcopy(work)
        return copy.deepcopy(work)

    def get(self, work_id: UUID) -> Optional[Work]:
        found = self.rows.get(work_id)
        return copy.deepcopy(found) if found else None

    def update(self, work: Work) -> Work:
        self.rows[work.id] = copy.deepcopy(work)
        return copy.deepcopy(work)

    def delete(self, work_id: UUID) -> bool:
        return self.rows.pop(work_id, None) is not None

    def list_sorted(self, order: SortOrder) -> List[Work]:
        self.last_order = order
        return list(self.rows.values())

    def search_by_title(self, fragment: str) -> List[Work]:
        return [w for w in self.rows.values() if fragment in w.title]

    def search_by_performer_name(self, fragment: str) -> List[Work]:
        return []

    def missing_performers(self, performer_ids: Iterable[UUID]) -> List[UUID]:
        return [pid for pid in performer_ids if pid not in self.performers.rows]


class FakeAccountStore:
    def __init__(self) -> None:
        self.rows: Dict[str, Account] = {}

    def create(self, account: Account) -> Account:
        self.rows[account.username] = account
        return account

    def exists(self, username: str) -> bool:
        return username in self.rows

    def get_by_username(self, username: str) -> Optional[Account]:
        return self.rows.get(username)


class FailingStore:
    """Every call raises the way a dropped database connection would."""

    def __getattr__(self, name):
        def _fail(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("connection lost"))
        return _fail


class PlainHasher:
    """Reversible stand-in so service tests do not pay for argon2."""

    def hash(self, password: str) -> str:
        return f"plain${password}"

    def verify(self, password: str, password_hash: str) -> bool:
        return password_hash == f"plain${password}"


@pytest.fixture()
def performer_store() -> FakePerformerStore:
    return FakePerformerStore()


@pytest.fixture()
def work_store(performer_store) -> FakeWorkStore:
    return FakeWorkStore(performer_store)


@pytest.fixture()
def account_store() -> FakeAccountStore:
    return FakeAccountStore()


@pytest.fixture()
def failing_store() -> FailingStore:
    return FailingStore()


@pytest.fixture()
def tokens() -> TokenValidator:
    return TokenValidator("service-test-signing-secret-abcdefghijklmnop")


@pytest.fixture()
def hasher() -> PlainHasher:
    return PlainHasher()
