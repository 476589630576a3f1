"""Product schemas."""

from core.schemas.product.request import (
    ProductCreateRequest,
    ProductFilterRequest,
    ProductUpdateRequest,
)
from core.schemas.product.response import ProductPageResponse, ProductResponse

__all__ = [
    "ProductCreateRequest",
    "ProductFilterRequest",
    "ProductPageResponse",
    "ProductResponse",
    "ProductUpdateRequest",
]
