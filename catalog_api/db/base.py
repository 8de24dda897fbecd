"""
SQLAlchemy declarative base and shared columns.
Challenge: Single place for table definitions and migrations.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models. Enables Alembic migrations."""

    pass


class EntityMixin:
    """UUID primary key plus system-assigned created/modified timestamps."""

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    created: Mapped[datetime] = mapped_column(
        "created_at", DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    modified: Mapped[datetime] = mapped_column(
        "modified_at",
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
