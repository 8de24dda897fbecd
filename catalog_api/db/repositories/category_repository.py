"""
Category repository - name lookups and active-only reads.
"""

import uuid

from catalog_api.db.models.category import Category
from catalog_api.db.repositories.base_repository import BaseRepository, coerce_id


class CategoryRepository(BaseRepository[Category]):
    """Category queries. Inactive categories are hidden from reads."""

    def __init__(self, session):
        super().__init__(session, Category)

    async def get_by_name(self, name: str) -> Category | None:
        """Includes inactive rows: the name stays taken after soft delete."""
        return await self.find_one(Category.name == name)

    async def get_active_by_id(self, id: uuid.UUID | str) -> Category | None:
        category_id = coerce_id(id)
        if category_id is None:
            return None
        return await self.find_one(Category.id == category_id, Category.is_active.is_(True))

    async def list_active(self, skip: int = 0, limit: int | None = None) -> list[Category]:
        return await self.find_all(
            Category.is_active.is_(True), order_by=Category.name.asc(), skip=skip, limit=limit
        )
