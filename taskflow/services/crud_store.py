"""CRUD Store Base — get/create/update/delete shared by every entity store.

Invariants:
    - get/update return None for a missing id; delete returns False
    - update applies only fields explicitly set on the update model
    - Rows carrying updated_at get it refreshed on every update
    - create/update return the row as persisted (refreshed after commit)

Design Decisions:
    - Subclasses set `model` and `entity`; no metaclass or registry
    - delete uses a bulk DELETE and rowcount instead of load-then-delete:
      one round-trip and a direct "was anything removed" answer
"""

import logging
from datetime import datetime, timezone

from pydantic import BaseModel
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.db.base import Base

logger = logging.getLogger(__name__)


class CrudStore:
    """Generic async CRUD over one ORM model."""

    model: type[Base]
    entity: str

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, row_id: int):
        result = await self.db.execute(
            select(self.model).where(self.model.id == row_id),
        )
        return result.scalar_one_or_none()

    async def create(self, payload: BaseModel):
        row = self.model(**payload.model_dump())
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info(
            f"{self.entity} {row.id} created",
            extra={"entity": self.entity, "entity_id": row.id},
        )
        return row

    async def update(self, row_id: int, changes: BaseModel):
        row = await self.get(row_id)
        if row is None:
            return None
        fields = changes.model_dump(exclude_unset=True)
        for name, value in fields.items():
            setattr(row, name, value)
        if hasattr(row, "updated_at"):
            row.updated_at = datetime.now(timezone.utc)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info(
            f"{self.entity} {row_id} updated ({', '.join(sorted(fields)) or 'no fields'})",
            extra={"entity": self.entity, "entity_id": row_id},
        )
        return row

    async def delete(self, row_id: int) -> bool:
        result = await self.db.execute(
            delete(self.model).where(self.model.id == row_id),
        )
        await self.db.commit()
        removed = (result.rowcount or 0) > 0
        if removed:
            logger.info(
                f"{self.entity} {row_id} deleted",
                extra={"entity": self.entity, "entity_id": row_id},
            )
        return removed
