"""
User model - identity with unique username and email.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.db.base import Base, EntityMixin


class User(EntityMixin, Base):
    """User entity. No soft-delete flag: users are always visible."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, index=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
