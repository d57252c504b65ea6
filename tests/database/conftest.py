# tests/database/conftest.py
from __future__ import annotations

import uuid

import pytest
from sqlalchemy.orm import Session

from filmlib.database.repos.performer_repo import SqlAlchemyPerformerRepo
from filmlib.database.repos.work_repo import SqlAlchemyWorkRepo
from filmlib.domain.entities.performer import Performer


@pytest.fixture()
def db(db_engine) -> Session:
    """A plain Session on the per-test engine; repos open their own transactions."""
    session = Session(bind=db_engine, expire_on_commit=False, autoflush=False, future=True)
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture()
def performer_repo(db) -> SqlAlchemyPerformerRepo:
    return SqlAlchemyPerformerRepo(db)


@pytest.fixture()
def work_repo(db) -> SqlAlchemyWorkRepo:
    return SqlAlchemyWorkRepo(db)


@pytest.fixture()
def make_performer(db, performer_repo):
    """Insert and commit a performer, returning the stored domain object."""
    def _make(name: str, **kw) -> Performer:
        created = performer_repo.create(Performer(id=uuid.uuid4(), name=name, **kw))
        db.commit()
        return created
    return _make
