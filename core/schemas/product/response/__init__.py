"""Product response schemas."""

from core.schemas.product.response.product_response import (
    ProductPageResponse,
    ProductResponse,
)

__all__ = ["ProductPageResponse", "ProductResponse"]
