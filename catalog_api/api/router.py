"""
API router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from catalog_api.api.endpoints import categories, health, products, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
