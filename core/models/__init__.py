"""Database models for core application."""

from core.models.category import Category
from core.models.order import Order
from core.models.order_item import OrderItem
from core.models.product import Product
from core.models.review import Review
from core.models.user import User

__all__ = ["Category", "Order", "OrderItem", "Product", "Review", "User"]
