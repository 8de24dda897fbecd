"""Category request/response schemas - REST API contract."""

import uuid
from datetime import datetime

from pydantic import Field

from catalog_api.schemas.base import CamelModel, ResponseModel


class CategoryCreate(CamelModel):
    name: str = Field(..., max_length=100)
    description: str | None = None
    color: str | None = Field(None, min_length=3, max_length=50)
    is_active: bool | None = Field(None, strict=True)
    icon: str | None = None


class CategoryResponse(ResponseModel):
    id: uuid.UUID
    name: str
    description: str | None = None
    color: str | None = None
    is_active: bool
    icon: str | None = None
    created: datetime
    modified: datetime
