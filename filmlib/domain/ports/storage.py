# filmlib/domain/ports/storage.py
from __future__ import annotations

from typing import Iterable, List, Optional, Protocol
from uuid import UUID

from filmlib.domain.entities.account import Account
from filmlib.domain.entities.performer import Performer, PerformerWithWorks
from filmlib.domain.entities.work import Work
from filmlib.domain.enums.sort_order import SortOrder


class PerformerStore(Protocol):
    def create(self, performer: Performer) -> Performer: ...
    def get(self, performer_id: UUID) -> Optional[Performer]: ...
    def update(self, performer: Performer) -> Performer: ...
    def delete(self, performer_id: UUID) -> bool: ...
    def list_with_works(self) -> List[PerformerWithWorks]: ...


class WorkStore(Protocol):
    def create(self, work: Work) -> Work: ...
    def get(self, work_id: UUID) -> Optional[Work]: ...
    def update(self, work: Work) -> Work: ...
    def delete(self, work_id: UUID) -> bool: ...
    def list_sorted(self, order: SortOrder) -> List[Work]: ...
    def search_by_title(self, fragment: str) -> List[Work]: ...
    def search_by_performer_name(self, fragment: str) -> List[Work]: ...
    def missing_performers(self, performer_ids: Iterable[UUID]) -> List[UUID]: ...


class AccountStore(Protocol):
    def create(self, account: Account) -> Account: ...
    def exists(self, username: str) -> bool: ...
    def get_by_username(self, username: str) -> Optional[Account]: ...
