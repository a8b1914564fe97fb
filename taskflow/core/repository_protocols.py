"""Boundary Protocols — contracts between the HTTP layer and the stores.

Invariants:
    - Core NEVER imports from shell (models, schemas, services) — arrows point inward
    - Absent rows are returned as None (get/update) or False (delete), never raised
    - update() applies only the fields explicitly set on the field update set
    - Implementations provided by services/ via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Row contracts (TaskLike, ...) describe what routes read off a stored row,
      so neither side couples to the ORM classes
    - Async in Protocol: every implementation does database IO
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Any, Protocol

from taskflow.core.domain_types import AppointmentId, CategoryId, TaskId
from taskflow.core.filters import AppointmentFilters, TaskFilters


class FieldSet(Protocol):
    """Validated payload (XCreate / XUpdate) as the stores consume it."""
    def model_dump(self, *, exclude_unset: bool = False) -> dict[str, Any]: ...


class CategoryLike(Protocol):
    id: int
    name: str
    color: str
    icon: str
    is_default: bool
    created_at: datetime


class ScheduledLike(Protocol):
    """Fields tasks and appointments share."""
    id: int
    title: str
    description: str | None
    category_id: int | None
    priority: str
    date: str
    tags: list | None
    created_at: datetime
    updated_at: datetime


class TaskLike(ScheduledLike, Protocol):
    category: str
    time: str
    completed: bool


class AppointmentLike(ScheduledLike, Protocol):
    category: str | None
    location: str | None
    start_time: str
    end_time: str


class CategoryRepository(Protocol):
    """Contract for category persistence."""
    async def list(self) -> Sequence[CategoryLike]: ...
    async def get(self, category_id: CategoryId) -> CategoryLike | None: ...
    async def create(self, payload: FieldSet) -> CategoryLike: ...
    async def update(
        self, category_id: CategoryId, changes: FieldSet,
    ) -> CategoryLike | None: ...
    async def delete(self, category_id: CategoryId) -> bool: ...


class TaskRepository(Protocol):
    """Contract for task persistence."""
    async def list(self, filters: TaskFilters | None = None) -> Sequence[TaskLike]: ...
    async def get(self, task_id: TaskId) -> TaskLike | None: ...
    async def create(self, payload: FieldSet) -> TaskLike: ...
    async def update(self, task_id: TaskId, changes: FieldSet) -> TaskLike | None: ...
    async def delete(self, task_id: TaskId) -> bool: ...
    async def search(self, text: str) -> Sequence[TaskLike]: ...


class AppointmentRepository(Protocol):
    """Contract for appointment persistence."""
    async def list(
        self, filters: AppointmentFilters | None = None,
    ) -> Sequence[AppointmentLike]: ...
    async def get(self, appointment_id: AppointmentId) -> AppointmentLike | None: ...
    async def create(self, payload: FieldSet) -> AppointmentLike: ...
    async def update(
        self, appointment_id: AppointmentId, changes: FieldSet,
    ) -> AppointmentLike | None: ...
    async def delete(self, appointment_id: AppointmentId) -> bool: ...
    async def search(self, text: str) -> Sequence[AppointmentLike]: ...
