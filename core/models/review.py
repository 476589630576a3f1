"""Review model."""

from typing import ClassVar

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.constants import MAX_RATING, MIN_RATING
from core.models.product import Product
from core.models.user import User


class Review(models.Model):
    """A single user's rating and comment for a product.

    At most one review exists per (product, user); the database enforces it.
    """

    product = models.ForeignKey(
        Product, on_delete=models.CASCADE, related_name="reviews"
    )
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="reviews")
    name = models.CharField(max_length=50)
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_RATING), MaxValueValidator(MAX_RATING)]
    )
    comment = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "reviews"
        ordering: ClassVar[list[str]] = ["created_at"]
        constraints: ClassVar[list[models.UniqueConstraint]] = [
            models.UniqueConstraint(
                fields=["product", "user"], name="unique_review_per_user"
            )
        ]

    def __str__(self) -> str:
        """Return string representation of review."""
        return f"Review {self.pk}: {self.rating} stars for product {self.product_id}"

    def __repr__(self) -> str:
        """Return detailed representation of review."""
        return (
            f"<Review(id={self.pk}, "
            f"product_id={self.product_id}, "
            f"user_id={self.user_id}, "
            f"rating={self.rating})>"
        )
