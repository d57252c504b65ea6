"""performers, works, work_performer and accounts

Revision ID: 4c1e9a7b2d10
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from filmlib.common.settings import get_settings

# revision identifiers, used by Alembic.
revision: str = '4c1e9a7b2d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_schema = get_settings().db_schema
SCHEMA = _schema if _schema and _schema != 'public' else None


def _service_object_columns() -> list:
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
        sa.Column('meta_data', sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql'), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'performers',
        *_service_object_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('gender', sa.Enum('male', 'female', 'other', name='performer_gender', native_enum=False, length=16), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_performers')),
        schema=SCHEMA,
    )
    op.create_index('ix_performers_name', 'performers', ['name'], unique=False, schema=SCHEMA)

    op.create_table(
        'works',
        *_service_object_columns(),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('rating', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.CheckConstraint('rating >= 0', name=op.f('ck_works_rating_non_negative')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_works')),
        schema=SCHEMA,
    )
    op.create_index('ix_works_title', 'works', ['title'], unique=False, schema=SCHEMA)
    op.create_index('ix_works_release_date', 'works', ['release_date'], unique=False, schema=SCHEMA)
    op.create_index('ix_works_rating', 'works', ['rating'], unique=False, schema=SCHEMA)

    # no foreign key on performer_id: credits outlive a deleted performer
    op.create_table(
        'work_performer',
        sa.Column('work_id', sa.Uuid(), nullable=False),
        sa.Column('performer_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(
            ['work_id'],
            [f'{SCHEMA}.works.id' if SCHEMA else 'works.id'],
            name=op.f('fk_work_performer_work_id_works'),
        ),
        sa.PrimaryKeyConstraint('work_id', 'performer_id', name=op.f('pk_work_performer')),
        schema=SCHEMA,
    )
    op.create_index('ix_work_performer_performer_id', 'work_performer', ['performer_id'], unique=False, schema=SCHEMA)

    op.create_table(
        'accounts',
        *_service_object_columns(),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('admin', 'user', 'unrecognized', name='account_role', native_enum=False, length=16), server_default=sa.text("'user'"), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_accounts')),
        sa.UniqueConstraint('username', name=op.f('uq_accounts_username')),
        schema=SCHEMA,
    )


def downgrade() -> None:
    op.drop_table('accounts', schema=SCHEMA)
    op.drop_index('ix_work_performer_performer_id', table_name='work_performer', schema=SCHEMA)
    op.drop_table('work_performer', schema=SCHEMA)
    op.drop_index('ix_works_rating', table_name='works', schema=SCHEMA)
    op.drop_index('ix_works_release_date', table_name='works', schema=SCHEMA)
    op.drop_index('ix_works_title', table_name='works', schema=SCHEMA)
    op.drop_table('works', schema=SCHEMA)
    op.drop_index('ix_performers_name', table_name='performers', schema=SCHEMA)
    op.drop_table('performers', schema=SCHEMA)
