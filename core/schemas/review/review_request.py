"""Schema for the add-review request."""

from pydantic import ConfigDict, Field

from core.constants import MAX_RATING, MIN_RATING
from core.schemas.base_schema_model import BaseSchemaModel


class ReviewCreateRequest(BaseSchemaModel):
    """Rating and comment submitted by the authenticated user."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"rating": 4, "comment": "Solid build."}}
    )

    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    comment: str = Field("", max_length=5000)
