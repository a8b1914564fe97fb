"""Seed the default categories offered by the task form.

Revision ID: 002_seed_categories
Revises: 001_tasks_schema
Create Date: 2025-01-08

Inserts Trabalho, Pessoal, Saúde and Estudo with is_default = true.
Downgrade removes only rows still flagged as default.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '002_seed_categories'
down_revision: Union[str, None] = '001_tasks_schema'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_categories = sa.table(
    'categories',
    sa.column('name', sa.Text),
    sa.column('color', sa.String),
    sa.column('icon', sa.String),
    sa.column('is_default', sa.Boolean),
)

DEFAULT_CATEGORIES = [
    {'name': 'Trabalho', 'color': '#3b82f6', 'icon': 'briefcase', 'is_default': True},
    {'name': 'Pessoal', 'color': '#22c55e', 'icon': 'user', 'is_default': True},
    {'name': 'Saúde', 'color': '#ef4444', 'icon': 'heart', 'is_default': True},
    {'name': 'Estudo', 'color': '#a855f7', 'icon': 'book', 'is_default': True},
]


def upgrade() -> None:
    op.bulk_insert(_categories, DEFAULT_CATEGORIES)


def downgrade() -> None:
    op.execute(
        _categories.delete().where(
            _categories.c.is_default.is_(True),
            _categories.c.name.in_([c['name'] for c in DEFAULT_CATEGORIES]),
        )
    )
