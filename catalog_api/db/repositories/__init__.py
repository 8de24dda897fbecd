# Repository pattern: abstract data access (SOLID - Dependency Inversion)

from catalog_api.db.repositories.category_repository import CategoryRepository
from catalog_api.db.repositories.product_repository import ProductRepository
from catalog_api.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "CategoryRepository", "ProductRepository"]
