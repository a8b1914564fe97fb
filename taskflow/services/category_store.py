"""Category Store — categories listed by name; no filters or search."""

from collections.abc import Sequence

from sqlalchemy import select

from taskflow.models.category import Category
from taskflow.services.crud_store import CrudStore


class CategoryStore(CrudStore):
    model = Category
    entity = "category"

    async def list(self) -> Sequence[Category]:
        result = await self.db.execute(
            select(Category).order_by(Category.name.asc(), Category.id.asc()),
        )
        return result.scalars().all()
