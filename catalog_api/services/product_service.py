"""
Product service - no uniqueness rules; active-only reads.
"""

import logging

from catalog_api.core.errors import NotFoundError
from catalog_api.db.models.product import Product
from catalog_api.db.repositories.product_repository import ProductRepository
from catalog_api.schemas.product import ProductCreate, ProductResponse

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, product_repo: ProductRepository):
        self.product_repo = product_repo

    async def create(self, data: ProductCreate) -> ProductResponse:
        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            stock=data.stock,
            image_url=data.image_url,
        )
        if data.is_active is not None:
            product.is_active = data.is_active
        product = await self.product_repo.add(product)
        logger.info("Product created", extra={"entity_id": product.id})
        return ProductResponse.model_validate(product)

    async def find_all(self, skip: int = 0, limit: int | None = None) -> list[ProductResponse]:
        products = await self.product_repo.list_active(skip=skip, limit=limit)
        return [ProductResponse.model_validate(p) for p in products]

    async def find_one(self, id: str) -> ProductResponse:
        product = await self.product_repo.get_active_by_id(id)
        if not product:
            raise NotFoundError("Product not found")
        return ProductResponse.model_validate(product)
