# filmlib/services/catalog/performer_service.py
from __future__ import annotations

import uuid
from typing import List
from uuid import UUID

from filmlib.common.logging import get_logger
from filmlib.domain.entities.performer import Performer, PerformerWithWorks
from filmlib.domain.policies.partial_merge import merge_partial
from filmlib.domain.ports.storage import PerformerStore
from filmlib.services.catalog.utils import storage_errors
from filmlib.services.exceptions import NotFoundError, ValidationError

logger = get_logger(__name__)


class PerformerService:
    def __init__(self, store: PerformerStore) -> None:
        self.store = store

    def create(self, performer: Performer) -> Performer:
        if not performer.name.strip():
            raise ValidationError("name is required", field="name")
        performer.id = uuid.uuid4()
        with storage_errors("create performer"):
            created = self.store.create(performer)
        logger.info("created performer %s", created.id)
        return created

    def get(self, performer_id: UUID) -> Performer:
        with storage_errors("load performer"):
            found = self.store.get(performer_id)
        if found is None:
            raise NotFoundError("Performer", performer_id)
        return found

    def update(self, performer_id: UUID, changes: Performer) -> Performer:
        """Apply the non-empty fields of `changes` onto the stored performer."""
        existing = self.get(performer_id)
        merged = merge_partial(existing, changes)
        with storage_errors("update performer"):
            updated = self.store.update(merged)
        logger.info("updated performer %s", performer_id)
        return updated

    def delete(self, performer_id: UUID) -> None:
        with storage_errors("delete performer"):
            deleted = self.store.delete(performer_id)
        if not deleted:
            raise NotFoundError("Performer", performer_id)
        logger.info("deleted performer %s", performer_id)

    def list_with_works(self) -> List[PerformerWithWorks]:
        with storage_errors("list performers"):
            return self.store.list_with_works()
