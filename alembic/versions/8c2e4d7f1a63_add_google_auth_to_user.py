"""add google auth to user

Revision ID: 8c2e4d7f1a63
Revises: 5b1f0c3a9d21
Create Date: 2025-03-19 21:37:52.018472

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c2e4d7f1a63'
down_revision: Union[str, Sequence[str], None] = '5b1f0c3a9d21'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Agrega las columnas de Google solo si no existen."""
    inspector = sa.inspect(op.get_bind())
    existing = {c['name']: c for c in inspector.get_columns('users')}
    columns = set(existing)

    if 'google_id' not in columns:
        op.add_column('users', sa.Column('google_id', sa.String(), nullable=True))
        op.create_index('ix_users_google_id', 'users', ['google_id'], unique=True)
    if 'google_name' not in columns:
        op.add_column('users', sa.Column('google_name', sa.String(), nullable=True))
    if 'google_picture' not in columns:
        op.add_column('users', sa.Column('google_picture', sa.String(), nullable=True))
    if 'last_login' not in columns:
        op.add_column('users', sa.Column('last_login', sa.DateTime(), nullable=True))

    # Las cuentas de Google no tienen contraseña
    if 'password' in existing and not existing['password']['nullable']:
        with op.batch_alter_table('users') as batch_op:
            batch_op.alter_column('password', existing_type=sa.String(), nullable=True)


def downgrade() -> None:
    # Solo aditiva: las columnas se conservan
    pass
