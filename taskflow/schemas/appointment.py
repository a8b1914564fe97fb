"""Appointment Schemas — insert payload, field update set, and response shape.

Invariants:
    - AppointmentCreate.title: stripped, non-empty
    - start_time / end_time match HH:MM; date is a real YYYY-MM-DD calendar day
    - Enum fields restricted to their literal sets, as for tasks
"""

from datetime import datetime

from pydantic import Field, field_validator, model_validator

from taskflow.core.domain_types import (
    DATE_PATTERN, TIME_PATTERN,
    PriorityLiteral, RecurringTypeLiteral, ReminderTimeLiteral,
)
from taskflow.schemas.common import (
    CamelModel, reject_explicit_nulls, require_calendar_date, strip_required_text,
)

_NON_NULLABLE = frozenset({
    "title", "priority", "date", "start_time", "end_time",
    "reminder_enabled", "is_recurring",
})


class AppointmentCreate(CamelModel):
    """Appointment insert payload."""
    title: str = Field(min_length=1, max_length=500)
    description: str | None = Field(None, max_length=5000)
    location: str | None = Field(None, max_length=500)
    category: str | None = Field(None, max_length=100)
    category_id: int | None = None
    priority: PriorityLiteral = "medium"
    date: str = Field(pattern=DATE_PATTERN)
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)
    reminder_enabled: bool = False
    reminder_time: ReminderTimeLiteral | None = None
    is_recurring: bool = False
    recurring_type: RecurringTypeLiteral | None = None
    tags: list[str] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return strip_required_text(v, "title")

    @field_validator("date")
    @classmethod
    def check_date(cls, v: str) -> str:
        return require_calendar_date(v)


class AppointmentUpdate(CamelModel):
    """Field update set for PATCH /api/appointments/{id}."""
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = Field(None, max_length=5000)
    location: str | None = Field(None, max_length=500)
    category: str | None = Field(None, max_length=100)
    category_id: int | None = None
    priority: PriorityLiteral | None = None
    date: str | None = Field(None, pattern=DATE_PATTERN)
    start_time: str | None = Field(None, pattern=TIME_PATTERN)
    end_time: str | None = Field(None, pattern=TIME_PATTERN)
    reminder_enabled: bool | None = None
    reminder_time: ReminderTimeLiteral | None = None
    is_recurring: bool | None = None
    recurring_type: RecurringTypeLiteral | None = None
    tags: list[str] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return strip_required_text(v, "title")

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


class AppointmentResponse(CamelModel):
    """Persisted appointment."""
    id: int
    title: str
    description: str | None
    location: str | None
    category: str | None
    category_id: int | None
    priority: str
    date: str
    start_time: str
    end_time: str
    reminder_enabled: bool
    reminder_time: str | None
    is_recurring: bool
    recurring_type: str | None
    tags: list[str] | None
    created_at: datetime
    updated_at: datetime
