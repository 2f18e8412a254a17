"""create_tasks_table

Revision ID: 4b1d9c2e7a10
Revises:
Create Date: 2026-10-18 09:12:44.318402

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d9c2e7a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tasks table."""
    op.create_table('tasks',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('priority', sa.String(length=10), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint("priority IN ('High', 'Medium', 'Low')", name='ck_tasks_priority'),
        sa.CheckConstraint("status IN ('pending', 'completed')", name='ck_tasks_status'),
        sa.CheckConstraint(
            "(status = 'completed') = (completed_at IS NOT NULL)",
            name='ck_tasks_completed_at_matches_status',
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tasks_created_at', 'tasks', ['created_at'], unique=False)
    op.create_index('ix_tasks_status_created_at', 'tasks', ['status', 'created_at'], unique=False)
    op.create_index('ix_tasks_status_completed_at', 'tasks', ['status', 'completed_at'], unique=False)


def downgrade() -> None:
    """Drop the tasks table."""
    op.drop_index('ix_tasks_status_completed_at', table_name='tasks')
    op.drop_index('ix_tasks_status_created_at', table_name='tasks')
    op.drop_index('ix_tasks_created_at', table_name='tasks')
    op.drop_table('tasks')
