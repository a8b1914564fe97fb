"""Task ORM — a to-do item scheduled on a date at a time.

Invariants:
    - title, category, date, time are non-nullable
    - priority defaults to "medium"; completed, reminder_enabled, is_recurring default False
    - date is an ISO `YYYY-MM-DD` string, time an `HH:MM` string (compared as text)
    - updated_at refreshed by TaskStore.update on every write

Design Decisions:
    - category (free text) and category_id (FK) stored independently: the label is
      what clients display, the FK is optional metadata. No consistency enforced.
    - tags as JSON column: portable across PostgreSQL and SQLite (tests)
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskflow.db.base import Base


class Task(Base):
    """Task entity."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    category_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True,
    )
    priority: Mapped[str] = mapped_column(
        String(10), nullable=False, default="medium",
    )
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    time: Mapped[str] = mapped_column(String(5), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    reminder_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    reminder_time: Mapped[str | None] = mapped_column(String(10), nullable=True)
    is_recurring: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    recurring_type: Mapped[str | None] = mapped_column(String(10), nullable=True)
    tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
