"""Initial schema — categories, tasks, appointments.

Revision ID: 001_tasks_schema
Revises: None
Create Date: 2025-01-06

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_tasks_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _scheduling_columns() -> list[sa.Column]:
    """Columns shared by tasks and appointments (fresh objects per table)."""
    return [
        sa.Column(
            "category_id", sa.Integer,
            sa.ForeignKey("categories.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("priority", sa.String(10), nullable=False, server_default="medium"),
        sa.Column("date", sa.String(10), nullable=False),
        sa.Column("reminder_enabled", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("reminder_time", sa.String(10), nullable=True),
        sa.Column("is_recurring", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("recurring_type", sa.String(10), nullable=True),
        sa.Column("tags", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("color", sa.String(32), nullable=False, server_default="#6366f1"),
        sa.Column("icon", sa.String(64), nullable=False, server_default="tag"),
        sa.Column("is_default", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "tasks",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("category", sa.Text, nullable=False),
        sa.Column("time", sa.String(5), nullable=False),
        sa.Column("completed", sa.Boolean, nullable=False, server_default=sa.false()),
        *_scheduling_columns(),
    )

    op.create_table(
        "appointments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("location", sa.Text, nullable=True),
        sa.Column("category", sa.Text, nullable=True),
        sa.Column("start_time", sa.String(5), nullable=False),
        sa.Column("end_time", sa.String(5), nullable=False),
        *_scheduling_columns(),
    )

    op.create_index("ix_tasks_date", "tasks", ["date"])
    op.create_index("ix_appointments_date", "appointments", ["date"])


def downgrade() -> None:
    op.drop_index("ix_appointments_date", table_name="appointments")
    op.drop_index("ix_tasks_date", table_name="tasks")
    op.drop_table("appointments")
    op.drop_table("tasks")
    op.drop_table("categories")
