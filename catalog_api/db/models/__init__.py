from catalog_api.db.models.category import Category
from catalog_api.db.models.product import Product
from catalog_api.db.models.user import User

__all__ = ["User", "Category", "Product"]
