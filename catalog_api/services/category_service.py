"""
Category service - unique names, active-only reads.
"""

import logging

from sqlalchemy.exc import IntegrityError

from catalog_api.core.errors import ConflictError, NotFoundError
from catalog_api.db.models.category import Category
from catalog_api.db.repositories.category_repository import CategoryRepository
from catalog_api.schemas.category import CategoryCreate, CategoryResponse

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "Category with this name already exists"


class CategoryService:
    """Handles category use cases: create, list (by name), get by id."""

    def __init__(self, category_repo: CategoryRepository):
        self.category_repo = category_repo

    async def create(self, data: CategoryCreate) -> CategoryResponse:
        if await self.category_repo.get_by_name(data.name):
            raise ConflictError(CONFLICT_MESSAGE)

        category = Category(
            name=data.name,
            description=data.description,
            color=data.color,
            icon=data.icon,
        )
        if data.is_active is not None:
            category.is_active = data.is_active
        try:
            category = await self.category_repo.add(category)
        except IntegrityError as exc:
            raise ConflictError(CONFLICT_MESSAGE) from exc
        logger.info("Category created", extra={"entity_id": category.id})
        return CategoryResponse.model_validate(category)

    async def find_all(self, skip: int = 0, limit: int | None = None) -> list[CategoryResponse]:
        """Active categories, name ascending."""
        categories = await self.category_repo.list_active(skip=skip, limit=limit)
        return [CategoryResponse.model_validate(c) for c in categories]

    async def find_one(self, id: str) -> CategoryResponse:
        category = await self.category_repo.get_active_by_id(id)
        if not category:
            raise NotFoundError("Category not found")
        return CategoryResponse.model_validate(category)
