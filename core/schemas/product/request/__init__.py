"""Product request schemas."""

from core.schemas.product.request.product_request import (
    ProductCreateRequest,
    ProductFilterRequest,
    ProductUpdateRequest,
)

__all__ = ["ProductCreateRequest", "ProductFilterRequest", "ProductUpdateRequest"]
