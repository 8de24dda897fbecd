"""
BDD step definitions for the availability feature (pytest-bdd).
Challenge: Express requirements in Gherkin; map to HTTP calls.
"""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient
from pytest_bdd import parsers, scenarios, then, when
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from catalog_api.db.session import get_db
from catalog_api.main import app

# Load all scenarios from the feature file
scenarios("../features/health.feature")


async def _sqlite_db():
    # Fresh engine per request: each step runs in its own event loop
    engine = create_async_engine("sqlite+aiosqlite://")
    try:
        async with async_sessionmaker(engine, expire_on_commit=False)() as session:
            yield session
    finally:
        await engine.dispose()


@pytest.fixture
def response():
    """Store last response for then steps."""
    app.dependency_overrides[get_db] = _sqlite_db
    yield {}
    app.dependency_overrides.clear()


@when(parsers.parse('I request "GET" "{path}"'))
def request_path(response, path):
    async def _get():
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            return await client.get(path)

    r = asyncio.run(_get())
    response["status"] = r.status_code
    response["text"] = r.text
    if r.headers.get("content-type", "").startswith("application/json"):
        response["body"] = r.json()


@then(parsers.parse("the response status should be {code:d}"))
def status_is(response, code):
    assert response["status"] == code


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_field_equals(response, key, value):
    assert response["body"].get(key) == value


@then(parsers.parse('the response text should be "{text}"'))
def text_equals(response, text):
    assert response["text"] == text
