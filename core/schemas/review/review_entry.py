"""In-memory review records used by the rating aggregator."""

from pydantic import BaseModel, ConfigDict, Field


class ReviewEntry(BaseModel):
    """A review as seen by the aggregator: who rated, and how."""

    model_config = ConfigDict(frozen=True)

    user_id: int = Field(..., description="Identity of the reviewer")
    name: str = Field("", description="Reviewer display name")
    rating: int = Field(..., description="Star rating given by the reviewer")
    comment: str = ""


class ReviewOutcome(BaseModel):
    """Result of offering a review to a product's rating summary.

    When ``duplicate`` is set, ``reviews``, ``num_reviews`` and ``rating``
    are exactly the values that were passed in.
    """

    model_config = ConfigDict(frozen=True)

    duplicate: bool
    reviews: tuple[ReviewEntry, ...]
    num_reviews: int
    rating: float
