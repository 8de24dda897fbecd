"""
Product model - priced, stocked item with optional category and creator.
"""

import uuid
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.db.base import Base, EntityMixin

if TYPE_CHECKING:
    from catalog_api.db.models.category import Category
    from catalog_api.db.models.user import User


class Product(EntityMixin, Base):
    """Product entity. Both references are nullable: a product need not be categorized or attributed."""

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    created_by_id: Mapped[uuid.UUID | None] = mapped_column(
        "created_by", ForeignKey("users.id"), nullable=True, index=True
    )
    category_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("categories.id"), nullable=True, index=True
    )

    created_by: Mapped[Optional["User"]] = relationship("User")
    category: Mapped[Optional["Category"]] = relationship("Category", back_populates="products")

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name})>"
