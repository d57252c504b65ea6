# tests/conftest.py
from __future__ import annotations

import pytest
from sqlalchemy.engine import Engine
from testcontainers.postgres import PostgresContainer

from filmlib.common.settings import get_settings
from filmlib.database.core.main import build_engine
from filmlib.database.models import Base  # registers every model on the metadata


@pytest.fixture(scope="session")
def database_url():
    """
    In-memory SQLite unless USE_TESTCONTAINERS=true, in which case a
    throwaway PostgreSQL container backs the whole session.
    """
    cfg = get_settings()
    if not cfg.use_testcontainers:
        yield "sqlite://"
        return
    with PostgresContainer(cfg.test_db_image) as pg:
        # testcontainers hands back a psycopg2 URL; the app runs on psycopg (v3)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture()
def db_engine(database_url) -> Engine:
    """Fresh tables for every test."""
    engine = build_engine(database_url, echo=False)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()
