"""Route Dependencies — store providers bound to the request's DB session.

Invariants:
    - One AsyncSession per request (from get_db); every store shares it
    - Routes depend on the repository Protocols, not the concrete stores
    - List query params (camelCase on the wire) become frozen filter dataclasses
    - A categoryId in a write payload must name an existing category (400 otherwise)

Design Decisions:
    - Providers are plain functions; FastAPI caches get_db per request, so a
      route taking two stores still uses one session
"""

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.core.repository_protocols import (
    AppointmentRepository, CategoryRepository, TaskRepository,
)
from taskflow.core.domain_types import (
    DATE_PATTERN, CategoryId, PriorityLiteral, SortBy, SortByLiteral, SortOrder,
    SortOrderLiteral,
)
from taskflow.core.errors import InvalidReferenceError
from taskflow.core.filters import AppointmentFilters, TaskFilters
from taskflow.infrastructure.database import get_db
from taskflow.services.appointment_store import AppointmentStore
from taskflow.services.category_store import CategoryStore
from taskflow.services.task_store import TaskStore


def get_task_store(db: AsyncSession = Depends(get_db)) -> TaskRepository:
    return TaskStore(db)


def get_appointment_store(
    db: AsyncSession = Depends(get_db),
) -> AppointmentRepository:
    return AppointmentStore(db)


def get_category_store(db: AsyncSession = Depends(get_db)) -> CategoryRepository:
    return CategoryStore(db)


def task_filters(
    category: str | None = Query(None),
    priority: PriorityLiteral | None = Query(None),
    completed: bool | None = Query(None),
    date_from: str | None = Query(None, alias="dateFrom", pattern=DATE_PATTERN),
    date_to: str | None = Query(None, alias="dateTo", pattern=DATE_PATTERN),
    tags: list[str] = Query(default=[]),
    sort_by: SortByLiteral | None = Query(None, alias="sortBy"),
    sort_order: SortOrderLiteral | None = Query(None, alias="sortOrder"),
) -> TaskFilters:
    """Query parameters of GET /api/tasks as a TaskFilters."""
    return TaskFilters(
        category=category,
        priority=priority,
        completed=completed,
        date_from=date_from,
        date_to=date_to,
        tags=tuple(tags),
        sort_by=SortBy(sort_by) if sort_by else None,
        sort_order=SortOrder(sort_order) if sort_order else None,
    )


def appointment_filters(
    category: str | None = Query(None),
    priority: PriorityLiteral | None = Query(None),
    date_from: str | None = Query(None, alias="dateFrom", pattern=DATE_PATTERN),
    date_to: str | None = Query(None, alias="dateTo", pattern=DATE_PATTERN),
    tags: list[str] = Query(default=[]),
    sort_by: SortByLiteral | None = Query(None, alias="sortBy"),
    sort_order: SortOrderLiteral | None = Query(None, alias="sortOrder"),
) -> AppointmentFilters:
    return AppointmentFilters(
        category=category,
        priority=priority,
        date_from=date_from,
        date_to=date_to,
        tags=tuple(tags),
        sort_by=SortBy(sort_by) if sort_by else None,
        sort_order=SortOrder(sort_order) if sort_order else None,
    )


async def require_category(
    category_id: int | None, categories: CategoryRepository,
) -> None:
    """Reject a categoryId that names no existing category."""
    if category_id is None:
        return
    if await categories.get(CategoryId(category_id)) is None:
        raise InvalidReferenceError("categoryId", "Category", category_id)
