"""Review response schema."""

from datetime import datetime
from typing import TYPE_CHECKING

from core.schemas.base_schema_model import BaseSchemaModel

if TYPE_CHECKING:
    from core.models import Review


class ReviewResponse(BaseSchemaModel):
    """Public view of a product review."""

    id: int
    user: int
    name: str
    rating: int
    comment: str
    created_at: datetime

    @classmethod
    def from_model(cls, review: "Review") -> "ReviewResponse":
        """Project a review model onto the response schema."""
        return cls(
            id=review.pk,
            user=review.user_id,
            name=review.name,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
        )
