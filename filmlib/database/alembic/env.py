# filmlib/database/alembic/env.py
from __future__ import annotations

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool, text
from sqlalchemy.engine import Connection

# Settings only; importing the API here would build the whole app graph.
from filmlib.common.settings import get_settings
from filmlib.database.models import Base

cfg = get_settings()

alembic_config = context.config

if alembic_config.config_file_name is not None:
    fileConfig(alembic_config.config_file_name)

database_url = cfg.database_url
target_metadata = Base.metadata

is_postgres = database_url.startswith("postgresql")
version_table_schema = cfg.alembic_version_table_schema if is_postgres else None


def include_object(object, name, type_, reflected, compare_to):
    """Limit autogenerate to the app schema (the version table may live in public)."""
    if type_ != "table":
        return True
    obj_schema = getattr(object, "schema", None)
    return obj_schema is None or obj_schema in {cfg.db_schema, version_table_schema}


def run_migrations_offline() -> None:
    """Emit SQL without a database connection."""
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        include_schemas=is_postgres,
        include_object=include_object,
        version_table_schema=version_table_schema,
    )

    with context.begin_transaction():
        context.run_migrations()


def _prepare_connection(conn: Connection) -> None:
    """Create the app schema if missing and put it first on the search_path."""
    if not is_postgres or cfg.db_schema == "public":
        return
    conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{cfg.db_schema}"'))
    conn.execute(text(f'SET search_path TO "{cfg.db_schema}", public'))


def run_migrations_online() -> None:
    connectable = create_engine(database_url, poolclass=pool.NullPool, future=True)

    with connectable.connect() as connection:
        _prepare_connection(connection)

        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            include_schemas=is_postgres,
            include_object=include_object,
            version_table_schema=version_table_schema,
            compare_type=True,
            compare_server_default=True,
            # SQLite can only ALTER through table copies
            render_as_batch=not is_postgres,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
