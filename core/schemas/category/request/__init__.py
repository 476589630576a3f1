"""Category request schemas."""

from core.schemas.category.request.category_request import (
    CategoryCreateRequest,
    CategoryUpdateRequest,
)

__all__ = ["CategoryCreateRequest", "CategoryUpdateRequest"]
