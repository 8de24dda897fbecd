"""
Base repository - generic CRUD interface (SOLID: Interface Segregation, Dependency Inversion).
Challenge: Consistent data access, testability via mocks, query optimization in one place.
"""

import uuid
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


def coerce_id(value: uuid.UUID | str) -> uuid.UUID | None:
    """Parse a path id. Anything that is not a UUID cannot exist, so return None."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: uuid.UUID | str) -> ModelType | None:
        """Fetch single entity by primary key. Used for detail endpoints."""
        entity_id = coerce_id(id)
        if entity_id is None:
            return None
        return await self.find_one(self.model.id == entity_id)

    async def find_one(self, *criteria: Any) -> ModelType | None:
        """First entity matching all criteria, or None."""
        result = await self.session.execute(select(self.model).where(*criteria).limit(1))
        return result.scalar_one_or_none()

    async def find_all(
        self,
        *criteria: Any,
        order_by: Any = None,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[ModelType]:
        """Entities matching all criteria. No limit means the whole (filtered) table."""
        stmt = select(self.model).where(*criteria)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        if skip:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller commits session.

        A storage-level constraint violation rolls the session back and re-raises
        IntegrityError for the service to translate.
        """
        self.session.add(entity)
        try:
            await self.session.flush()  # Get server defaults without committing
        except IntegrityError:
            await self.session.rollback()
            raise
        await self.session.refresh(entity)
        return entity
