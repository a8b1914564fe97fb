"""Task Schemas — insert payload, field update set, and response shape.

Invariants:
    - TaskCreate.title: stripped, non-empty; category: stripped, non-empty
    - priority / reminder_time / recurring_type restricted to their literal sets
    - date is a real YYYY-MM-DD calendar day, time matches HH:MM
    - TaskUpdate: every field optional; only explicitly sent fields are applied

Design Decisions:
    - TaskUpdate is an explicit model (not a dict): the store applies
      model_dump(exclude_unset=True), so "absent" and "null" stay distinguishable
"""

from datetime import datetime

from pydantic import Field, ValidationInfo, field_validator, model_validator

from taskflow.core.domain_types import (
    DATE_PATTERN, TIME_PATTERN,
    PriorityLiteral, RecurringTypeLiteral, ReminderTimeLiteral,
)
from taskflow.schemas.common import (
    CamelModel, reject_explicit_nulls, require_calendar_date, strip_required_text,
)

_NON_NULLABLE = frozenset({
    "title", "category", "priority", "date", "time",
    "completed", "reminder_enabled", "is_recurring",
})


class TaskCreate(CamelModel):
    """Task insert payload — server assigns id and timestamps."""
    title: str = Field(min_length=1, max_length=500)
    description: str | None = Field(None, max_length=5000)
    category: str = Field(min_length=1, max_length=100)
    category_id: int | None = None
    priority: PriorityLiteral = "medium"
    date: str = Field(pattern=DATE_PATTERN)
    time: str = Field(pattern=TIME_PATTERN)
    completed: bool = False
    reminder_enabled: bool = False
    reminder_time: ReminderTimeLiteral | None = None
    is_recurring: bool = False
    recurring_type: RecurringTypeLiteral | None = None
    tags: list[str] | None = None

    @field_validator("title", "category")
    @classmethod
    def strip_text(cls, v: str, info: ValidationInfo) -> str:
        return strip_required_text(v, info.field_name)

    @field_validator("date")
    @classmethod
    def check_date(cls, v: str) -> str:
        return require_calendar_date(v)


class TaskUpdate(CamelModel):
    """Field update set for PATCH /api/tasks/{id}."""
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = Field(None, max_length=5000)
    category: str | None = Field(None, min_length=1, max_length=100)
    category_id: int | None = None
    priority: PriorityLiteral | None = None
    date: str | None = Field(None, pattern=DATE_PATTERN)
    time: str | None = Field(None, pattern=TIME_PATTERN)
    completed: bool | None = None
    reminder_enabled: bool | None = None
    reminder_time: ReminderTimeLiteral | None = None
    is_recurring: bool | None = None
    recurring_type: RecurringTypeLiteral | None = None
    tags: list[str] | None = None

    @field_validator("title", "category")
    @classmethod
    def strip_text(cls, v: str | None, info: ValidationInfo) -> str | None:
        if v is None:
            return v
        return strip_required_text(v, info.field_name)

    @field_validator("date")
    @classmethod
    def check_date(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return require_calendar_date(v)

    @model_validator(mode="after")
    def validate_nulls(self):
        reject_explicit_nulls(self, _NON_NULLABLE)
        return self


class TaskResponse(CamelModel):
    """Persisted task."""
    id: int
    title: str
    description: str | None
    category: str
    category_id: int | None
    priority: str
    date: str
    time: str
    completed: bool
    reminder_enabled: bool
    reminder_time: str | None
    is_recurring: bool
    recurring_type: str | None
    tags: list[str] | None
    created_at: datetime
    updated_at: datetime
