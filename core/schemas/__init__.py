"""Schemas for the core app."""

from core.schemas.category import CategoryResponse
from core.schemas.common import MessageResponse, PaypalConfigResponse, UploadResponse
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.order import OrderResponse, OrderTotals
from core.schemas.product import ProductPageResponse, ProductResponse
from core.schemas.review import ReviewEntry, ReviewOutcome, ReviewResponse
from core.schemas.user import UserProfileResponse, UserResponse

__all__ = [
    "CategoryResponse",
    "DependencyHealth",
    "LivenessResponse",
    "MessageResponse",
    "OrderResponse",
    "OrderTotals",
    "PaypalConfigResponse",
    "ProductPageResponse",
    "ProductResponse",
    "ReadinessResponse",
    "ReviewEntry",
    "ReviewOutcome",
    "ReviewResponse",
    "UploadResponse",
    "UserProfileResponse",
    "UserResponse",
]
