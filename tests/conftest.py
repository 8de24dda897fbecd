"""
Pytest fixtures - test DB, client, seeded entities.
Challenge: Isolated tests; in-memory SQLite instead of PostgreSQL.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.core.security import hash_password
from catalog_api.db.base import Base
from catalog_api.db.models import Category, Product, User
from catalog_api.db.session import get_db
from catalog_api.main import app

# One shared connection so every session sees the same in-memory database
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_user(session: AsyncSession) -> User:
    user = User(
        username="tester",
        email="test@example.com",
        hashed_password=hash_password("password123"),
    )
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


@pytest_asyncio.fixture
async def test_category(session: AsyncSession) -> Category:
    category = Category(name="Electronics", color="#1E88E5")
    session.add(category)
    await session.flush()
    await session.refresh(category)
    return category


@pytest_asyncio.fixture
async def test_product(session: AsyncSession, test_user: User, test_category: Category) -> Product:
    product = Product(
        name="Widget",
        price=9.99,
        stock=5,
        created_by_id=test_user.id,
        category_id=test_category.id,
    )
    session.add(product)
    await session.flush()
    await session.refresh(product)
    return product
