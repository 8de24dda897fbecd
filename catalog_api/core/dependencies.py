"""
FastAPI dependencies - service factories with repository injection (SOLID: Dependency Inversion).
Challenge: Keep endpoints thin; one request-scoped session per service.
"""

from typing import Annotated

from fastapi import Depends, Query

from catalog_api.config import get_settings
from catalog_api.db.session import DbSession
from catalog_api.db.repositories import CategoryRepository, ProductRepository, UserRepository
from catalog_api.services.category_service import CategoryService
from catalog_api.services.product_service import ProductService
from catalog_api.services.user_service import UserService

settings = get_settings()


def get_user_service(session: DbSession) -> UserService:
    return UserService(UserRepository(session))


def get_category_service(session: DbSession) -> CategoryService:
    return CategoryService(CategoryRepository(session))


def get_product_service(session: DbSession) -> ProductService:
    return ProductService(ProductRepository(session))


class Page:
    """Optional pagination. Without limit, lists return every matching row."""

    def __init__(
        self,
        skip: int = Query(0, ge=0),
        limit: int | None = Query(None, ge=1, le=settings.max_page_size),
    ):
        self.skip = skip
        self.limit = limit


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
PageDep = Annotated[Page, Depends()]
