"""Product request/response schemas - REST API contract."""

import uuid
from datetime import datetime
from decimal import Decimal

from pydantic import Field

from catalog_api.schemas.base import CamelModel, ResponseModel

# products.stock is a 32-bit INTEGER column
MAX_STOCK = 2_147_483_647


class ProductCreate(CamelModel):
    name: str = Field(..., max_length=100)
    description: str | None = None
    # Mirrors NUMERIC(10, 2): at most 8 whole digits and 2 fractional digits
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(..., ge=0, le=MAX_STOCK, strict=True)
    is_active: bool | None = Field(None, strict=True)
    image_url: str | None = None


class ProductResponse(ResponseModel):
    """Category and creator references are deliberately not expanded."""

    id: uuid.UUID
    name: str
    description: str | None = None
    price: float
    stock: int
    is_active: bool
    image_url: str | None = None
    created: datetime
    modified: datetime
