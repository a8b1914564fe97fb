"""Category ORM — user-defined labels with color and icon.

Invariants:
    - id is a serial integer primary key
    - name is non-nullable text
    - Deleting a category never deletes tasks/appointments (FK is ON DELETE SET NULL)

Design Decisions:
    - No relationship() to tasks/appointments: nothing navigates from a category
      to its dependents, and a backref would invite accidental cascades
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.db.base import Base


class Category(Base):
    """Category entity — referenced optionally by tasks and appointments."""
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    color: Mapped[str] = mapped_column(String(32), nullable=False, default="#6366f1")
    icon: Mapped[str] = mapped_column(String(64), nullable=False, default="tag")
    is_default: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
