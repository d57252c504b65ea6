# filmlib/services/catalog/work_service.py
from __future__ import annotations

import uuid
from typing import List
from uuid import UUID

from filmlib.common.logging import get_logger
from filmlib.domain.entities.work import Work
from filmlib.domain.policies.partial_merge import merge_partial
from filmlib.domain.policies.sort_selector import select_sort_order
from filmlib.domain.ports.storage import WorkStore
from filmlib.services.catalog.utils import storage_errors
from filmlib.services.exceptions import NotFoundError, ValidationError

logger = get_logger(__name__)


class WorkService:
    """
    Works and their performer links.

    Create/update/delete touch two tables and rely on the store running them
    in one transaction.
    """

    def __init__(self, store: WorkStore) -> None:
        self.store = store

    def _check_performers(self, work: Work) -> None:
        ids = [p.id for p in work.performers]
        if any(pid is None for pid in ids):
            raise ValidationError("every performer reference needs an id", field="performer_ids")
        if len(set(ids)) != len(ids):
            raise ValidationError("performer references must be unique", field="performer_ids")
        with storage_errors("check performers"):
            missing = self.store.missing_performers(ids)
        if missing:
            raise NotFoundError("Performer", missing[0])

    def create(self, work: Work) -> Work:
        if not work.title.strip():
            raise ValidationError("title is required", field="title")
        self._check_performers(work)
        work.id = uuid.uuid4()
        with storage_errors("create work"):
            created = self.store.create(work)
        logger.info("created work %s with %d performer(s)", created.id, len(created.performers))
        return created

    def get(self, work_id: UUID) -> Work:
        with storage_errors("load work"):
            found = self.store.get(work_id)
        if found is None:
            raise NotFoundError("Work", work_id)
        return found

    def update(self, work_id: UUID, changes: Work) -> Work:
        """
        Sparse update. Scalars keep their stored value when `changes` holds
        the zero value; the performer list is replaced only if non-empty.
        """
        existing = self.get(work_id)
        merged = merge_partial(existing, changes, wholesale=("performers",))
        if merged.performers is not existing.performers:
            self._check_performers(merged)
        with storage_errors("update work"):
            updated = self.store.update(merged)
        logger.info("updated work %s", work_id)
        return updated

    def delete(self, work_id: UUID) -> None:
        with storage_errors("delete work"):
            deleted = self.store.delete(work_id)
        if not deleted:
            raise NotFoundError("Work", work_id)
        logger.info("deleted work %s", work_id)

    def list_sorted(self, mode: int) -> List[Work]:
        order = select_sort_order(mode)
        with storage_errors("list works"):
            return self.store.list_sorted(order)

    def search_by_title(self, fragment: str | None) -> List[Work]:
        """Plain substring match; an empty fragment matches every work."""
        fragment = fragment or ""
        with storage_errors("search works by title"):
            return self.store.search_by_title(fragment)

    def search_by_performer_name(self, fragment: str | None) -> List[Work]:
        fragment = fragment or ""
        with storage_errors("search works by performer"):
            return self.store.search_by_performer_name(fragment)
