"""
User repository - encapsulates all user data access (SOLID: Single Responsibility).
Challenge: Keep queries in one place for optimization and reuse.
"""

from sqlalchemy import or_

from catalog_api.db.models.user import User
from catalog_api.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries. Extends base CRUD with uniqueness lookups."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        return await self.find_one(User.email == email)

    async def get_by_username(self, username: str) -> User | None:
        return await self.find_one(User.username == username)

    async def find_by_email_or_username(self, email: str, username: str) -> list[User]:
        """Users holding either unique key (at most two). Used before registration."""
        return await self.find_all(or_(User.email == email, User.username == username))
