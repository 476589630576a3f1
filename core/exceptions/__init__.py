"""Exception handling utilities for the shop service."""

from core.exceptions.domain_exceptions import (
    BusinessRuleError,
    CategoryNotFoundError,
    ConflictError,
    DuplicateReviewError,
    OrderNotFoundError,
    ProductNotFoundError,
    ResourceNotFoundError,
    ShopServiceError,
    UserNotFoundError,
)
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "BusinessRuleError",
    "CategoryNotFoundError",
    "ConflictError",
    "DuplicateReviewError",
    "OrderNotFoundError",
    "ProductNotFoundError",
    "ResourceNotFoundError",
    "ShopServiceError",
    "UserNotFoundError",
    "custom_exception_handler",
]
