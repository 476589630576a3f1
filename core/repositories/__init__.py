"""Query helpers over the core models."""

from core.repositories.category_repository import CategoryRepository
from core.repositories.order_repository import OrderRepository
from core.repositories.product_repository import ProductRepository
from core.repositories.user_repository import UserRepository

__all__ = [
    "CategoryRepository",
    "OrderRepository",
    "ProductRepository",
    "UserRepository",
]
