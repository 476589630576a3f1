"""Product rating aggregation.

Keeps the one-review-per-user rule and the mean rating of a product. The
rating is always recomputed from the full review list, which repairs any
drift left behind by earlier writes.
"""

from collections.abc import Iterable, Sequence

from core.schemas.review import ReviewEntry, ReviewOutcome


def recompute_rating(ratings: Iterable[int | float]) -> float:
    """Arithmetic mean of the ratings, or 0 when there are none."""
    values = list(ratings)
    if not values:
        return 0.0
    return sum(values) / len(values)


def has_reviewed(reviews: Iterable[ReviewEntry], user_id: int) -> bool:
    """Whether ``user_id`` already reviewed the product."""
    return any(review.user_id == user_id for review in reviews)


def add_review(
    reviews: Sequence[ReviewEntry],
    num_reviews: int,
    rating: float,
    candidate: ReviewEntry,
) -> ReviewOutcome:
    """Offer a new review to a product's rating summary.

    Args:
        reviews: Current reviews of the product.
        num_reviews: Current stored review count.
        rating: Current stored mean rating.
        candidate: The review being added.

    Returns:
        ReviewOutcome with ``duplicate=True`` and the inputs unchanged when
        the candidate's user already reviewed the product, otherwise the
        extended review list with a fresh count and mean.
    """
    if has_reviewed(reviews, candidate.user_id):
        return ReviewOutcome(
            duplicate=True,
            reviews=tuple(reviews),
            num_reviews=num_reviews,
            rating=rating,
        )

    updated = (*reviews, candidate)
    return ReviewOutcome(
        duplicate=False,
        reviews=updated,
        num_reviews=len(updated),
        rating=recompute_rating(review.rating for review in updated),
    )
