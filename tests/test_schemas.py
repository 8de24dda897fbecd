"""
Schema tests - input contracts reject malformed payloads, responses hide secrets.
"""

import pytest
from pydantic import ValidationError

from catalog_api.schemas.category import CategoryCreate
from catalog_api.schemas.product import ProductCreate
from catalog_api.schemas.user import UserCreate, UserResponse


def test_user_create_accepts_minimum_lengths():
    user = UserCreate(username="abc", email="a@example.com", password="123456")
    assert user.username == "abc"


@pytest.mark.parametrize("password", ["12345", "x" * 73])
def test_user_create_password_bounds(password):
    with pytest.raises(ValidationError):
        UserCreate(username="abc", email="a@example.com", password=password)


def test_user_response_has_no_password_field():
    assert "password" not in UserResponse.model_fields
    assert "hashed_password" not in UserResponse.model_fields


def test_category_create_camel_case_aliases():
    category = CategoryCreate.model_validate({"name": "Audio", "isActive": False})
    assert category.is_active is False
    assert category.model_dump(by_alias=True)["isActive"] is False


def test_product_create_strips_unknown_fields():
    product = ProductCreate.model_validate(
        {"name": "Widget", "price": 1, "stock": 2, "categoryId": "x", "createdBy": "y"}
    )
    assert set(product.model_dump()) == {
        "name", "description", "price", "stock", "is_active", "image_url",
    }


def test_product_create_rejects_fractional_stock():
    with pytest.raises(ValidationError):
        ProductCreate.model_validate({"name": "Widget", "price": 1, "stock": 2.5})
