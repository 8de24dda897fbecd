"""
Product API tests - REST create/list/get and soft delete.
"""

import uuid

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_api.core.dependencies import get_product_service
from catalog_api.main import app
from catalog_api.schemas.product import MAX_STOCK


@pytest.mark.asyncio
async def test_create_product(client: AsyncClient):
    """POST /products defaults isActive to true; GET returns the same payload."""
    response = await client.post("/products", json={"name": "Widget", "price": 9.99, "stock": 5})
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Widget"
    assert data["price"] == 9.99
    assert data["stock"] == 5
    assert data["isActive"] is True
    assert data["description"] is None
    assert data["imageUrl"] is None
    assert data["created"] <= data["modified"]

    fetched = await client.get(f"/products/{data['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == data


@pytest.mark.asyncio
async def test_create_product_full_payload(client: AsyncClient):
    payload = {
        "name": "Headphones",
        "description": "Over-ear",
        "price": 0,
        "stock": 0,
        "isActive": True,
        "imageUrl": "https://cdn.example.com/h.png",
    }
    data = (await client.post("/products", json=payload)).json()
    for key, value in payload.items():
        assert data[key] == value


@pytest.mark.asyncio
async def test_products_have_no_uniqueness_rule(client: AsyncClient):
    body = {"name": "Widget", "price": 1, "stock": 1}
    first = await client.post("/products", json=body)
    second = await client.post("/products", json=body)
    assert first.status_code == second.status_code == 201
    assert first.json()["id"] != second.json()["id"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"price": 1, "stock": 1},
        {"name": "Widget", "stock": 1},
        {"name": "Widget", "price": 1},
        {"name": "Widget", "price": -0.01, "stock": 1},
        {"name": "Widget", "price": 1, "stock": -1},
        {"name": "Widget", "price": "cheap", "stock": 1},
        {"name": "x" * 101, "price": 1, "stock": 1},
        {"name": "Widget", "price": 1, "stock": 1, "isActive": "true"},
        {"name": "Widget", "price": 9.999, "stock": 1},
        {"name": "Widget", "price": 1e9, "stock": 1},
        {"name": "Widget", "price": 1, "stock": 10**20},
        {"name": "Widget", "price": 1, "stock": MAX_STOCK + 1},
    ],
)
async def test_create_product_validation(client: AsyncClient, payload: dict):
    response = await client.post("/products", json=payload)
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_references_not_expanded(client: AsyncClient, test_product):
    """Category and creator stay out of the response contract."""
    data = (await client.get(f"/products/{test_product.id}")).json()
    assert set(data) == {
        "id", "name", "description", "price", "stock", "isActive", "imageUrl", "created", "modified",
    }


@pytest.mark.asyncio
async def test_list_products_active_only(client: AsyncClient, session, test_product):
    await client.post("/products", json={"name": "Gadget", "price": 2.5, "stock": 1})
    names = {p["name"] for p in (await client.get("/products")).json()}
    assert names == {"Widget", "Gadget"}

    test_product.is_active = False
    await session.flush()

    listed = (await client.get("/products")).json()
    assert [p["name"] for p in listed] == ["Gadget"]
    response = await client.get(f"/products/{test_product.id}")
    assert response.status_code == 404
    assert response.json()["detail"] == "Product not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("product_id", [str(uuid.uuid4()), "42"])
async def test_get_product_not_found(client: AsyncClient, product_id: str):
    response = await client.get(f"/products/{product_id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_product_storage_bounds(client: AsyncClient):
    """Largest price and stock the columns hold are accepted and returned unchanged."""
    response = await client.post(
        "/products", json={"name": "Bulk", "price": 99999999.99, "stock": MAX_STOCK}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["price"] == 99999999.99
    assert data["stock"] == MAX_STOCK


@pytest.mark.asyncio
async def test_unexpected_failure_returns_generic_500():
    """Unexpected errors become a 500 without internal details."""

    class FailingProductService:
        async def find_all(self, skip=0, limit=None):
            raise RuntimeError("connection pool exhausted")

    app.dependency_overrides[get_product_service] = lambda: FailingProductService()
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as client:
            response = await client.get("/products")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error", "code": "INTERNAL_ERROR"}
    assert "connection pool" not in response.text
