"""create_employees_table

Revision ID: 4c1e7a9b2d10
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e7a9b2d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create employees table (idempotent - safe on databases bootstrapped by init_db)
    from sqlalchemy import inspect

    bind = op.get_bind()
    inspector = inspect(bind)

    if 'employees' not in inspector.get_table_names():
        op.create_table('employees',
            sa.Column('id', sa.String(length=32), nullable=False),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('job_role', sa.String(length=50), nullable=False),
            sa.Column('salary', sa.Numeric(precision=12, scale=2), nullable=False),
            sa.Column('employee_registration', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('employee_registration', name='uq_employees_employee_registration')
        )

    # Refresh inspector after potential table creation
    inspector = inspect(bind)
    existing_indexes = [idx['name'] for idx in inspector.get_indexes('employees')]

    if 'idx_employees_created_at' not in existing_indexes:
        op.create_index('idx_employees_created_at', 'employees', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_employees_created_at', table_name='employees')
    op.drop_table('employees')
