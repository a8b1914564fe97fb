"""Task Store — filtered/sorted listing, search, and CRUD for tasks.

Invariants:
    - list() with no filters returns every task, newest first
    - completed filter is exact-match and only applied when not None
    - search() orders newest first regardless of any filter state
"""

from collections.abc import Sequence

from sqlalchemy import and_, select

from taskflow.core.filters import TaskFilters, has_all_tags
from taskflow.models.task import Task
from taskflow.services.crud_store import CrudStore
from taskflow.services.query_builders import (
    filter_conditions, order_by_clauses, search_condition,
)


class TaskStore(CrudStore):
    model = Task
    entity = "task"

    async def list(self, filters: TaskFilters | None = None) -> Sequence[Task]:
        filters = filters or TaskFilters()
        conditions = filter_conditions(Task, filters)
        if filters.completed is not None:
            conditions.append(Task.completed == filters.completed)

        query = select(Task)
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(*order_by_clauses(Task, filters))

        result = await self.db.execute(query)
        return [
            t for t in result.scalars().all()
            if has_all_tags(t.tags, filters.tags)
        ]

    async def search(self, text: str) -> Sequence[Task]:
        result = await self.db.execute(
            select(Task)
            .where(search_condition(Task, text))
            .order_by(Task.created_at.desc(), Task.id.desc()),
        )
        return result.scalars().all()
