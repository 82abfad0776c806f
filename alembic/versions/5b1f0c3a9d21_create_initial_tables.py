"""create initial tables

Revision ID: 5b1f0c3a9d21
Revises:
Create Date: 2025-03-02 18:04:11.220391

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1f0c3a9d21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns():
    return [
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
    ]


def upgrade() -> None:
    """Crea solo las tablas que falten (bases existentes no se tocan)."""
    existing = set(sa.inspect(op.get_bind()).get_table_names())

    if 'users' not in existing:
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('username', sa.String(), nullable=False, unique=True, index=True),
            sa.Column('password', sa.String(), nullable=True),
            sa.Column('email', sa.String(), nullable=False, unique=True, index=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('last_login', sa.DateTime(), nullable=True),
        )

    if 'incomes' not in existing:
        op.create_table(
            'incomes',
            *_record_columns(),
            sa.Column('source', sa.String(), nullable=False),
            sa.Column('category', sa.String(), nullable=False),
            sa.Column('amount', sa.Numeric(), nullable=False),
            sa.Column('type', sa.String(), nullable=False),
            sa.Column('frequency', sa.String(), nullable=False),
            sa.Column('notes', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        )

    if 'expenses' not in existing:
        op.create_table(
            'expenses',
            *_record_columns(),
            sa.Column('category', sa.String(), nullable=False),
            sa.Column('amount', sa.Numeric(), nullable=False),
            sa.Column('description', sa.String(), nullable=False),
            sa.Column('date', sa.DateTime(), nullable=False),
            sa.Column('notes', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        )

    if 'assets' not in existing:
        op.create_table(
            'assets',
            *_record_columns(),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('category', sa.String(), nullable=False),
            sa.Column('value', sa.Numeric(), nullable=False),
            sa.Column('income_generated', sa.Numeric(), nullable=False),
            sa.Column('notes', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        )

    if 'liabilities' not in existing:
        op.create_table(
            'liabilities',
            *_record_columns(),
            sa.Column('description', sa.String(), nullable=False),
            sa.Column('type', sa.String(), nullable=False),
            sa.Column('amount', sa.Numeric(), nullable=False),
            sa.Column('interest_rate', sa.Numeric(), nullable=False),
            sa.Column('notes', sa.String(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        )

    if 'goals' not in existing:
        op.create_table(
            'goals',
            *_record_columns(),
            sa.Column('description', sa.String(), nullable=False),
            sa.Column('target_amount', sa.Numeric(), nullable=False),
            sa.Column('current_amount', sa.Numeric(), nullable=False),
            sa.Column('target_date', sa.Date(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
        )


def downgrade() -> None:
    # Las migraciones son solo aditivas: no se eliminan tablas con datos
    pass
