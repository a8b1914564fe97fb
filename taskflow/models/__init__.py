"""ORM Models — SQLAlchemy declarative models for categories, tasks, appointments.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tasks and appointments reference categories through a nullable FK

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from taskflow.models.category import Category  # noqa: F401
from taskflow.models.task import Task  # noqa: F401
from taskflow.models.appointment import Appointment  # noqa: F401
