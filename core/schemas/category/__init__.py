"""Category schemas."""

from core.schemas.category.request import (
    CategoryCreateRequest,
    CategoryUpdateRequest,
)
from core.schemas.category.response import CategoryResponse

__all__ = ["CategoryCreateRequest", "CategoryResponse", "CategoryUpdateRequest"]
