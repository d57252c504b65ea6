# filmlib/database/repos/performer_repo.py
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select, delete as sa_delete
from sqlalchemy.orm import Session

from filmlib.database.models import (
    Performer as DBPerformer,
    Work as DBWork,
    WorkPerformer as DBWorkPerformer,
)
from filmlib.database.repos._mapping import (
    PERFORMER_COLUMNS,
    PERFORMER_WITH_WORKS,
    WORK_COLUMNS,
    to_domain_performer,
)
from filmlib.domain.entities.performer import Performer, PerformerWithWorks
from filmlib.domain.policies.row_aggregation import aggregate_rows


class SqlAlchemyPerformerRepo:
    """
    SQLAlchemy-backed PerformerStore. Does not commit; the session owner does.
    """

    def __init__(self, session: Session) -> None:
        self.db = session

    def create(self, performer: Performer) -> Performer:
        row = DBPerformer(
            id=performer.id,
            name=performer.name,
            gender=performer.gender,
            birth_date=performer.birth_date,
        )
        self.db.add(row)
        self.db.flush()
        return to_domain_performer(row)

    def get(self, performer_id: UUID) -> Optional[Performer]:
        row = self.db.get(DBPerformer, performer_id)
        return to_domain_performer(row) if row else None

    def update(self, performer: Performer) -> Performer:
        row = self.db.get(DBPerformer, performer.id)
        if row is None:
            raise ValueError("Performer not found")
        row.name = performer.name
        row.gender = performer.gender
        row.birth_date = performer.birth_date
        self.db.flush()
        return to_domain_performer(row)

    def delete(self, performer_id: UUID) -> bool:
        # Links to works stay in place; only work deletion/update removes them.
        result = self.db.execute(sa_delete(DBPerformer).where(DBPerformer.id == performer_id))
        return (result.rowcount or 0) > 0

    def list_with_works(self) -> List[PerformerWithWorks]:
        stmt = (
            select(*PERFORMER_COLUMNS, *WORK_COLUMNS)
            .select_from(DBPerformer)
            .outerjoin(DBWorkPerformer, DBWorkPerformer.performer_id == DBPerformer.id)
            .outerjoin(DBWork, DBWork.id == DBWorkPerformer.work_id)
            .order_by(DBPerformer.name.asc())
        )
        return aggregate_rows(self.db.execute(stmt).mappings(), PERFORMER_WITH_WORKS)
