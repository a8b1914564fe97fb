"""Filter Sets — typed predicate/sort bundles accepted by list operations.

Invariants:
    - Every field is optional; an empty filter set means "all rows, newest first"
    - date_from/date_to are inclusive bounds on the ISO `date` column
    - tags: a row matches only if it carries every requested tag
    - completed exists only on TaskFilters (appointments have no completed flag)

Design Decisions:
    - Frozen dataclasses, not pydantic: filters are built by the route layer after
      query-param validation, so no second validation pass is needed here
    - effective_sort() centralizes the default (created, desc) so stores never
      special-case a missing sort directive
"""

from dataclasses import dataclass

from taskflow.core.domain_types import SortBy, SortOrder


@dataclass(frozen=True)
class EntityFilters:
    """Filters shared by tasks and appointments."""
    category: str | None = None
    priority: str | None = None
    date_from: str | None = None
    date_to: str | None = None
    tags: tuple[str, ...] = ()
    sort_by: SortBy | None = None
    sort_order: SortOrder | None = None

    def effective_sort(self) -> tuple[SortBy, SortOrder]:
        """Resolve the sort directive, defaulting to newest-first."""
        if self.sort_by is None:
            return SortBy.CREATED, SortOrder.DESC
        return self.sort_by, self.sort_order or SortOrder.DESC


@dataclass(frozen=True)
class TaskFilters(EntityFilters):
    completed: bool | None = None


@dataclass(frozen=True)
class AppointmentFilters(EntityFilters):
    pass


def has_all_tags(row_tags: list[str] | None, wanted: tuple[str, ...]) -> bool:
    """True if row_tags contains every tag in wanted (empty wanted matches all)."""
    if not wanted:
        return True
    return set(wanted).issubset(row_tags or [])
