"""create employees and tasks tables

Revision ID: 3b9e1c2d4f70
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b9e1c2d4f70'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('employees',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(length=200), nullable=False),
        sa.Column('job_title', sa.String(length=100), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_employees_full_name', 'employees', ['full_name'], unique=False)

    op.create_table('tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('task_name', sa.String(length=200), nullable=False),
        sa.Column('task_type', sa.String(length=50), nullable=True),
        sa.Column(
            'status',
            sa.Enum('NEW', 'APPOINTED', 'IN_PROGRESS', 'DONE', 'EVALUATED', name='taskstatus'),
            nullable=False,
            server_default='NEW'
        ),
        sa.Column('priority', sa.Integer(), nullable=True),
        sa.Column('lead_time', sa.Integer(), nullable=True),
        sa.Column('employee_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['employee_id'], ['employees.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_tasks_employee_id', 'tasks', ['employee_id'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_tasks_employee_id', table_name='tasks')
    op.drop_table('tasks')

    op.drop_index('idx_employees_full_name', table_name='employees')
    op.drop_table('employees')
