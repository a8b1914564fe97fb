"""Appointment Store — filtered/sorted listing, search, and CRUD for appointments.

Invariants:
    - Same filter/sort semantics as TaskStore, minus the completed flag
"""

from collections.abc import Sequence

from sqlalchemy import and_, select

from taskflow.core.filters import AppointmentFilters, has_all_tags
from taskflow.models.appointment import Appointment
from taskflow.services.crud_store import CrudStore
from taskflow.services.query_builders import (
    filter_conditions, order_by_clauses, search_condition,
)


class AppointmentStore(CrudStore):
    model = Appointment
    entity = "appointment"

    async def list(
        self, filters: AppointmentFilters | None = None,
    ) -> Sequence[Appointment]:
        filters = filters or AppointmentFilters()
        conditions = filter_conditions(Appointment, filters)

        query = select(Appointment)
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(*order_by_clauses(Appointment, filters))

        result = await self.db.execute(query)
        return [
            a for a in result.scalars().all()
            if has_all_tags(a.tags, filters.tags)
        ]

    async def search(self, text: str) -> Sequence[Appointment]:
        result = await self.db.execute(
            select(Appointment)
            .where(search_condition(Appointment, text))
            .order_by(Appointment.created_at.desc(), Appointment.id.desc()),
        )
        return result.scalars().all()
