from __future__ import annotations

from sqlalchemy import event, func, select
from sqlalchemy.orm import Session, sessionmaker
from starlette.testclient import TestClient

from filmlib.database.models import Performer as DBPerformer
from filmlib.services.api.app import create_app
from filmlib.services.api.deps import get_db
from filmlib.services.auth.tokens import get_token_validator


def _client_with_failing_commit(db_engine, api_tokens) -> TestClient:
    TestSession = sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False, future=True)
    app = create_app()

    def _refuse_commit(session):
        raise RuntimeError("commit refused")

    def _override_db():
        db = TestSession()
        event.listen(db, "before_commit", _refuse_commit)
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_db
    app.dependency_overrides[get_token_validator] = lambda: api_tokens
    return TestClient(app, raise_server_exceptions=False)


def test_commit_failure_is_reported_not_created(db_engine, api_tokens, admin):
    with _client_with_failing_commit(db_engine, api_tokens) as client:
        r = client.post("/api/performers", json={"name": "Al Pacino"}, headers=admin)

    # the commit runs before the response goes out
    assert r.status_code == 500

    with Session(bind=db_engine) as check:
        assert check.execute(select(func.count()).select_from(DBPerformer)).scalar_one() == 0


def test_successful_write_is_committed(api_client, admin, db_engine):
    r = api_client.post("/api/performers", json={"name": "Al Pacino"}, headers=admin)
    assert r.status_code == 201

    with Session(bind=db_engine) as check:
        assert check.execute(select(func.count()).select_from(DBPerformer)).scalar_one() == 1
