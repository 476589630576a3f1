"""Review schemas."""

from core.schemas.review.review_entry import ReviewEntry, ReviewOutcome
from core.schemas.review.review_request import ReviewCreateRequest
from core.schemas.review.review_response import ReviewResponse

__all__ = ["ReviewCreateRequest", "ReviewEntry", "ReviewOutcome", "ReviewResponse"]
