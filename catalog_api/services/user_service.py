"""
User service - registration and lookups (SOLID: Single Responsibility).
Challenge: Friendly conflict errors before insert; storage constraint as backstop.
Design: Service depends on the repository abstraction; easy to test with mocks.
"""

import logging

from sqlalchemy.exc import IntegrityError

from catalog_api.core.errors import ConflictError, NotFoundError
from catalog_api.core.security import hash_password
from catalog_api.db.models.user import User
from catalog_api.db.repositories.user_repository import UserRepository
from catalog_api.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """Handles user use cases: create, list, get by id."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def create(self, data: UserCreate) -> UserResponse:
        """Register a user. Email clash is reported before username clash."""
        existing = await self.user_repo.find_by_email_or_username(data.email, data.username)
        if any(u.email == data.email for u in existing):
            raise ConflictError("Email already exists")
        if existing:
            raise ConflictError("Username already exists")

        user = User(
            username=data.username,
            email=data.email,
            hashed_password=hash_password(data.password),
        )
        try:
            user = await self.user_repo.add(user)
        except IntegrityError as exc:
            # Concurrent registration slipped past the pre-check
            raise ConflictError("Username or email already exists") from exc
        logger.info("User created", extra={"entity_id": user.id})
        return UserResponse.model_validate(user)

    async def find_all(self, skip: int = 0, limit: int | None = None) -> list[UserResponse]:
        users = await self.user_repo.find_all(skip=skip, limit=limit)
        return [UserResponse.model_validate(u) for u in users]

    async def find_one(self, id: str) -> UserResponse:
        user = await self.user_repo.get_by_id(id)
        if not user:
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)

    async def find_by_email(self, email: str) -> User | None:
        return await self.user_repo.get_by_email(email)

    async def find_by_username(self, username: str) -> User | None:
        return await self.user_repo.get_by_username(username)
