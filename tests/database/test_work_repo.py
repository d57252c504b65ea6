from __future__ import annotations

import uuid
from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from filmlib.database.models import Work as DBWork, WorkPerformer as DBWorkPerformer
from filmlib.domain.entities.performer import Performer
from filmlib.domain.entities.work import Work
from filmlib.domain.enums import SortOrder


def _new_work(title, *performers, **kw) -> Work:
    return Work(id=uuid.uuid4(), title=title, performers=[Performer(id=p.id) for p in performers], **kw)


def _link_count(db, work_id=None) -> int:
    stmt = select(func.count()).select_from(DBWorkPerformer)
    if work_id is not None:
        stmt = stmt.where(DBWorkPerformer.work_id == work_id)
    return db.execute(stmt).scalar_one()


def test_create_and_get_with_performers(db, work_repo, make_performer):
    pacino = make_performer("Al Pacino")
    deniro = make_performer("Robert De Niro")

    created = work_repo.create(_new_work("Heat", pacino, deniro, rating=8, release_date=date(1995, 12, 15)))

    assert created.title == "Heat"
    assert {p.name for p in created.performers} == {"Al Pacino", "Robert De Niro"}
    assert _link_count(db, created.id) == 2


def test_work_without_performers_still_listed(work_repo):
    w = work_repo.create(_new_work("Solo"))

    got = work_repo.get(w.id)
    assert got is not None and got.performers == []
    assert [x.title for x in work_repo.list_sorted(SortOrder.title_asc)] == ["Solo"]


def test_get_unknown_returns_none(work_repo):
    assert work_repo.get(uuid.uuid4()) is None


def test_update_replaces_link_set(db, work_repo, make_performer):
    a, b, c = make_performer("A"), make_performer("B"), make_performer("C")
    w = work_repo.create(_new_work("Ronin", a, b))

    w.performers = [Performer(id=c.id)]
    w.rating = 6
    updated = work_repo.update(w)

    assert [p.id for p in updated.performers] == [c.id]
    assert updated.rating == 6
    assert _link_count(db, w.id) == 1


def test_delete_removes_links_first(db, work_repo, make_performer):
    a = make_performer("A")
    w = work_repo.create(_new_work("Ronin", a))

    assert work_repo.delete(w.id) is True
    assert work_repo.get(w.id) is None
    assert _link_count(db, w.id) == 0


def test_delete_unknown_reports_false(work_repo):
    assert work_repo.delete(uuid.uuid4()) is False


def test_failed_create_leaves_nothing_behind(db, work_repo, make_performer):
    a = make_performer("A")
    broken = _new_work("Twice", a, a)  # same link twice violates the composite key

    with pytest.raises(IntegrityError):
        work_repo.create(broken)

    assert db.execute(select(func.count()).select_from(DBWork)).scalar_one() == 0
    assert _link_count(db) == 0


@pytest.mark.parametrize(
    "order, expected",
    [
        (SortOrder.title_asc, ["Alien", "Brazil", "Casino"]),
        (SortOrder.release_date_desc, ["Casino", "Brazil", "Alien"]),
        (SortOrder.rating_desc, ["Brazil", "Alien", "Casino"]),
    ],
)
def test_list_sorted(work_repo, order, expected):
    work_repo.create(_new_work("Casino", release_date=date(1995, 11, 22), rating=7))
    work_repo.create(_new_work("Alien", release_date=date(1979, 5, 25), rating=8))
    work_repo.create(_new_work("Brazil", release_date=date(1985, 2, 20), rating=9))

    assert [w.title for w in work_repo.list_sorted(order)] == expected


def test_search_by_title_treats_wildcards_literally(work_repo):
    work_repo.create(_new_work("100% Wolf"))
    work_repo.create(_new_work("1000 Wolves"))

    assert [w.title for w in work_repo.search_by_title("100%")] == ["100% Wolf"]


def test_search_by_performer_name_lists_matching_credits(work_repo, make_performer):
    pacino = make_performer("Al Pacino")
    deniro = make_performer("Robert De Niro")
    work_repo.create(_new_work("Heat", pacino, deniro))
    work_repo.create(_new_work("Taxi Driver", deniro))
    work_repo.create(_new_work("Scarface", pacino))

    found = work_repo.search_by_performer_name("Niro")

    assert sorted(w.title for w in found) == ["Heat", "Taxi Driver"]
    for w in found:
        assert [p.name for p in w.performers] == ["Robert De Niro"]


def test_missing_performers(work_repo, make_performer):
    a = make_performer("A")
    ghost = uuid.uuid4()
    assert work_repo.missing_performers([a.id, ghost]) == [ghost]
    assert work_repo.missing_performers([]) == []
