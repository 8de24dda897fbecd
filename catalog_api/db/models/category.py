"""
Category model - groups products; soft-deleted through is_active.
"""

from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.db.base import Base, EntityMixin

if TYPE_CHECKING:
    from catalog_api.db.models.product import Product


class Category(EntityMixin, Base):
    """Category entity. One category has many products."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)
    icon: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Not loaded for API responses; use selectinload when needed
    products: Mapped[list["Product"]] = relationship("Product", back_populates="category")

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"
