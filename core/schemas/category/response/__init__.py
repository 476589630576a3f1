"""Category response schemas."""

from core.schemas.category.response.category_response import CategoryResponse

__all__ = ["CategoryResponse"]
