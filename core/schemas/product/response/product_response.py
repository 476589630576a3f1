"""Product response schemas."""

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel, Money
from core.schemas.category import CategoryResponse
from core.schemas.review import ReviewResponse

if TYPE_CHECKING:
    from core.models import Product


class ProductResponse(BaseSchemaModel):
    """Public view of a product including its rating summary and reviews."""

    id: int
    name: str
    image: str
    brand: str
    quantity: int
    category: CategoryResponse | None = None
    description: str
    reviews: list[ReviewResponse] = Field(default_factory=list)
    rating: float
    num_reviews: int
    price: Money
    count_in_stock: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, product: "Product") -> "ProductResponse":
        """Project a product model onto the response schema.

        Callers should prefetch ``reviews`` and select ``category`` to keep
        list endpoints at a constant number of queries.
        """
        category = product.category
        return cls(
            id=product.pk,
            name=product.name,
            image=product.image,
            brand=product.brand,
            quantity=product.quantity,
            category=CategoryResponse.from_model(category) if category else None,
            description=product.description,
            reviews=[ReviewResponse.from_model(r) for r in product.reviews.all()],
            rating=product.rating,
            num_reviews=product.num_reviews,
            price=product.price,
            count_in_stock=product.count_in_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductPageResponse(BaseSchemaModel):
    """One page of a keyword product search."""

    products: list[ProductResponse]
    page: int
    pages: int
    has_more: bool
    total: int
