"""
Product repository - active-only reads (SOLID: Single Responsibility).
Challenge: References are never eager-loaded; responses do not expand them.
"""

import uuid

from catalog_api.db.models.product import Product
from catalog_api.db.repositories.base_repository import BaseRepository, coerce_id


class ProductRepository(BaseRepository[Product]):
    """Product queries. Inactive products are hidden from reads."""

    def __init__(self, session):
        super().__init__(session, Product)

    async def get_active_by_id(self, id: uuid.UUID | str) -> Product | None:
        product_id = coerce_id(id)
        if product_id is None:
            return None
        return await self.find_one(Product.id == product_id, Product.is_active.is_(True))

    async def list_active(self, skip: int = 0, limit: int | None = None) -> list[Product]:
        return await self.find_all(Product.is_active.is_(True), skip=skip, limit=limit)
