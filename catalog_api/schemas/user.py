"""User request/response schemas - API contract and validation."""

import uuid
from datetime import datetime

from pydantic import EmailStr, Field

from catalog_api.schemas.base import CamelModel, ResponseModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    # bcrypt accepts max 72 bytes; longer passwords cause 500. Validate here for clear 400.
    password: str = Field(..., min_length=6, max_length=72)


class UserResponse(ResponseModel):
    """Public view of a user. Never carries the password or its hash."""

    id: uuid.UUID
    username: str
    email: str
    created: datetime
    modified: datetime
