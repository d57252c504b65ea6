# filmlib/database/repos/_mapping.py
from __future__ import annotations

from sqlalchemy.engine import RowMapping

from filmlib.database.models import (
    Account as DBAccount,
    Performer as DBPerformer,
    Work as DBWork,
)
from filmlib.domain.entities.account import Account as DomainAccount
from filmlib.domain.entities.performer import Performer as DomainPerformer, PerformerWithWorks
from filmlib.domain.entities.work import Work as DomainWork
from filmlib.domain.policies.row_aggregation import JoinShape

# Labels shared by every join query so one pair of row readers serves both
# aggregation directions.
WORK_COLUMNS = (
    DBWork.id.label("work_id"),
    DBWork.title.label("work_title"),
    DBWork.description.label("work_description"),
    DBWork.release_date.label("work_release_date"),
    DBWork.rating.label("work_rating"),
)

PERFORMER_COLUMNS = (
    DBPerformer.id.label("performer_id"),
    DBPerformer.name.label("performer_name"),
    DBPerformer.gender.label("performer_gender"),
    DBPerformer.birth_date.label("performer_birth_date"),
)


def work_from_row(row: RowMapping) -> DomainWork:
    return DomainWork(
        id=row["work_id"],
        title=row["work_title"],
        description=row["work_description"] or "",
        release_date=row["work_release_date"],
        rating=row["work_rating"] or 0,
    )


def performer_from_row(row: RowMapping) -> DomainPerformer:
    return DomainPerformer(
        id=row["performer_id"],
        name=row["performer_name"],
        gender=row["performer_gender"],
        birth_date=row["performer_birth_date"],
    )


def performer_with_works_from_row(row: RowMapping) -> PerformerWithWorks:
    return PerformerWithWorks(
        id=row["performer_id"],
        name=row["performer_name"],
        gender=row["performer_gender"],
        birth_date=row["performer_birth_date"],
    )


WORK_WITH_PERFORMERS: JoinShape[DomainWork, DomainPerformer] = JoinShape(
    parent_key="work_id",
    child_key="performer_id",
    make_parent=work_from_row,
    make_child=performer_from_row,
    add_child=lambda work, performer: work.performers.append(performer),
)

PERFORMER_WITH_WORKS: JoinShape[PerformerWithWorks, DomainWork] = JoinShape(
    parent_key="performer_id",
    child_key="work_id",
    make_parent=performer_with_works_from_row,
    make_child=work_from_row,
    add_child=lambda performer, work: performer.works.append(work),
)


def to_domain_performer(row: DBPerformer) -> DomainPerformer:
    return DomainPerformer(id=row.id, name=row.name, gender=row.gender, birth_date=row.birth_date)


def to_domain_account(row: DBAccount) -> DomainAccount:
    return DomainAccount(id=row.id, username=row.username, password_hash=row.password_hash, role=row.role)
