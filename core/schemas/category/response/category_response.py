"""Category response schema."""

from typing import TYPE_CHECKING

from core.schemas.base_schema_model import BaseSchemaModel

if TYPE_CHECKING:
    from core.models import Category


class CategoryResponse(BaseSchemaModel):
    """Public view of a category."""

    id: int
    name: str
    description: str = ""

    @classmethod
    def from_model(cls, category: "Category") -> "CategoryResponse":
        """Project a category model onto the response schema."""
        return cls.model_validate(category)
