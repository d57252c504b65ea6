# filmlib/database/repos/work_repo.py
from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import UUID

from sqlalchemy import Select, select, delete as sa_delete
from sqlalchemy.orm import Session

from filmlib.common.logging import get_logger
from filmlib.database.core.transaction import transactional
from filmlib.database.models import (
    Performer as DBPerformer,
    Work as DBWork,
    WorkPerformer as DBWorkPerformer,
)
from filmlib.database.repos._mapping import PERFORMER_COLUMNS, WORK_COLUMNS, WORK_WITH_PERFORMERS
from filmlib.domain.entities.work import Work
from filmlib.domain.enums.sort_order import SortOrder
from filmlib.domain.policies.row_aggregation import aggregate_rows

logger = get_logger(__name__)

_ORDERINGS = {
    SortOrder.title_asc: (DBWork.title.asc(),),
    SortOrder.release_date_desc: (DBWork.release_date.desc().nullslast(),),
    # ties keep whatever order the database hands back
    SortOrder.rating_desc: (DBWork.rating.desc(),),
}


class SqlAlchemyWorkRepo:
    """
    SQLAlchemy-backed WorkStore.

    Every read goes through one LEFT JOIN (works -> links -> performers) and
    the row aggregator, so a work with no performers still comes back, with
    an empty list. Writes that touch both works and links run inside
    `transactional`.
    """

    def __init__(self, session: Session) -> None:
        self.db = session

    # ---------------------------------------------------------------- reads

    def _joined(self) -> Select:
        return (
            select(*WORK_COLUMNS, *PERFORMER_COLUMNS)
            .select_from(DBWork)
            .outerjoin(DBWorkPerformer, DBWorkPerformer.work_id == DBWork.id)
            .outerjoin(DBPerformer, DBPerformer.id == DBWorkPerformer.performer_id)
        )

    def _aggregate(self, stmt: Select) -> List[Work]:
        return aggregate_rows(self.db.execute(stmt).mappings(), WORK_WITH_PERFORMERS)

    def get(self, work_id: UUID) -> Optional[Work]:
        works = self._aggregate(self._joined().where(DBWork.id == work_id))
        return works[0] if works else None

    def list_sorted(self, order: SortOrder) -> List[Work]:
        return self._aggregate(self._joined().order_by(*_ORDERINGS[order]))

    def search_by_title(self, fragment: str) -> List[Work]:
        return self._aggregate(self._joined().where(DBWork.title.contains(fragment, autoescape=True)))

    def search_by_performer_name(self, fragment: str) -> List[Work]:
        # The filter applies to join rows: each work lists only the
        # performers whose name matched.
        return self._aggregate(self._joined().where(DBPerformer.name.contains(fragment, autoescape=True)))

    def missing_performers(self, performer_ids: Iterable[UUID]) -> List[UUID]:
        wanted = list(dict.fromkeys(performer_ids))
        if not wanted:
            return []
        found = set(self.db.execute(select(DBPerformer.id).where(DBPerformer.id.in_(wanted))).scalars())
        return [pid for pid in wanted if pid not in found]

    # --------------------------------------------------------------- writes

    def _insert_links(self, work: Work) -> None:
        links = work.links()
        if links:
            self.db.add_all(
                DBWorkPerformer(work_id=link.work_id, performer_id=link.performer_id) for link in links
            )

    def _delete_links(self, work_id: UUID) -> None:
        self.db.execute(sa_delete(DBWorkPerformer).where(DBWorkPerformer.work_id == work_id))

    def create(self, work: Work) -> Work:
        with transactional(self.db):
            self.db.add(
                DBWork(
                    id=work.id,
                    title=work.title,
                    description=work.description,
                    release_date=work.release_date,
                    rating=work.rating,
                )
            )
            self.db.flush()
            self._insert_links(work)
            self.db.flush()
        logger.debug("inserted work %s with %d performer link(s)", work.id, len(work.performers))
        return self.get(work.id)  # type: ignore[arg-type,return-value]

    def update(self, work: Work) -> Work:
        """Overwrite the row and replace the link set as a whole."""
        with transactional(self.db):
            row = self.db.get(DBWork, work.id)
            if row is None:
                raise ValueError("Work not found")
            row.title = work.title
            row.description = work.description
            row.release_date = work.release_date
            row.rating = work.rating
            self._delete_links(row.id)
            self._insert_links(work)
            self.db.flush()
        return self.get(work.id)  # type: ignore[arg-type,return-value]

    def delete(self, work_id: UUID) -> bool:
        with transactional(self.db):
            self._delete_links(work_id)
            result = self.db.execute(sa_delete(DBWork).where(DBWork.id == work_id))
        return (result.rowcount or 0) > 0
