"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId, AppointmentId, CategoryId wrap serial ints
    - Every enumerated field value is constrained by a Literal set at the boundary
    - PRIORITY_RANK orders priorities low < medium < high < urgent

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Pydantic schemas use the Literal aliases below; Enums exist only where code
      branches on the value (priority ranking, sort resolution)
"""

from enum import Enum
from typing import Literal, NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", int)
AppointmentId = NewType("AppointmentId", int)
CategoryId = NewType("CategoryId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Priority(str, Enum):
    """Task/appointment priority — maps to DB `priority` column."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class SortBy(str, Enum):
    """Sort keys accepted by list operations."""
    DATE = "date"
    PRIORITY = "priority"
    TITLE = "title"
    CREATED = "created"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


PRIORITY_RANK: dict[str, int] = {
    Priority.LOW.value: 0,
    Priority.MEDIUM.value: 1,
    Priority.HIGH.value: 2,
    Priority.URGENT.value: 3,
}


# ─── Literal aliases (pydantic boundary) ─────────────────────────

PriorityLiteral = Literal["low", "medium", "high", "urgent"]
ReminderTimeLiteral = Literal["15min", "1hour", "1day"]
RecurringTypeLiteral = Literal["daily", "weekly", "monthly"]
SortByLiteral = Literal["date", "priority", "title", "created"]
SortOrderLiteral = Literal["asc", "desc"]

# ISO 8601 calendar date and 24h clock time; both sort correctly as strings
DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"
