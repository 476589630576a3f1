"""Schemas for product create and update requests.

Both JSON bodies and multipart form fields are accepted; form values arrive
as strings and are coerced by pydantic.
"""

from decimal import Decimal

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class ProductCreateRequest(BaseSchemaModel):
    """Request schema for creating a product. Every field is required."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Trail Runner 2",
                "image": "/uploads/image-1718000000000.png",
                "brand": "Stride",
                "quantity": 12,
                "category": 1,
                "description": "Lightweight trail running shoe.",
                "price": "89.90",
                "countInStock": 12,
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=255)
    image: str = Field(..., min_length=1, max_length=500)
    brand: str = Field(..., min_length=1, max_length=255)
    quantity: int = Field(..., gt=0)
    category: int
    description: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    count_in_stock: int = Field(..., ge=0)


class ProductUpdateRequest(BaseSchemaModel):
    """Partial product update; omitted fields are left untouched."""

    name: str | None = Field(None, min_length=1, max_length=255)
    image: str | None = Field(None, max_length=500)
    brand: str | None = Field(None, max_length=255)
    quantity: int | None = Field(None, gt=0)
    category: int | None = None
    description: str | None = None
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    count_in_stock: int | None = Field(None, ge=0)


class ProductFilterRequest(BaseSchemaModel):
    """Catalog filter by category and inclusive price range."""

    category: int | None = None
    min_price: Decimal | None = Field(None, ge=0)
    max_price: Decimal | None = Field(None, ge=0)
