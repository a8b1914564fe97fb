"""Query Builders — filter, sort, and search clauses shared by task and appointment stores.

Invariants:
    - Filters combine with AND; search columns combine with OR
    - Every ORDER BY ends with id in the same direction (deterministic ties)
    - Priority sorts by rank (low < medium < high < urgent), not alphabetically
    - LIKE wildcards in search text match literally

Design Decisions:
    - Builders take the ORM class as a parameter: Task and Appointment share every
      filterable column, so one builder serves both
    - Tag containment is NOT built here: JSON containment differs per dialect,
      so stores apply filters.has_all_tags() to the fetched rows
"""

from sqlalchemy import ColumnElement, case, or_

from taskflow.core.domain_types import PRIORITY_RANK, SortBy, SortOrder
from taskflow.core.filters import EntityFilters

_LIKE_ESCAPE = "\\"


def filter_conditions(model, filters: EntityFilters) -> list[ColumnElement[bool]]:
    """Equality and date-range predicates for the shared filter fields."""
    conditions = []
    if filters.category:
        conditions.append(model.category == filters.category)
    if filters.priority:
        conditions.append(model.priority == filters.priority)
    if filters.date_from:
        conditions.append(model.date >= filters.date_from)
    if filters.date_to:
        conditions.append(model.date <= filters.date_to)
    return conditions


def priority_rank(model) -> ColumnElement[int]:
    return case(PRIORITY_RANK, value=model.priority, else_=len(PRIORITY_RANK))


def order_by_clauses(model, filters: EntityFilters) -> list:
    """ORDER BY for the filter set's sort directive (default: newest first)."""
    sort_by, sort_order = filters.effective_sort()
    column = {
        SortBy.DATE: model.date,
        SortBy.PRIORITY: priority_rank(model),
        SortBy.TITLE: model.title,
        SortBy.CREATED: model.created_at,
    }[sort_by]
    if sort_order == SortOrder.ASC:
        return [column.asc(), model.id.asc()]
    return [column.desc(), model.id.desc()]


def escape_like(text: str) -> str:
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


def search_condition(model, text: str) -> ColumnElement[bool]:
    """Case-insensitive substring match on title OR description OR category."""
    pattern = f"%{escape_like(text)}%"
    return or_(
        model.title.ilike(pattern, escape=_LIKE_ESCAPE),
        model.description.ilike(pattern, escape=_LIKE_ESCAPE),
        model.category.ilike(pattern, escape=_LIKE_ESCAPE),
    )
