"""Product model."""

from decimal import Decimal
from typing import ClassVar

from django.db import models

from core.models.category import Category


class Product(models.Model):
    """Catalog product with its denormalized rating summary.

    ``rating`` and ``num_reviews`` are rewritten together with every review
    insertion; see ``core.services.review_aggregator``.
    """

    name = models.CharField(max_length=255, unique=True)
    image = models.CharField(max_length=500)
    brand = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField()
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )
    description = models.TextField()
    price = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0"))
    count_in_stock = models.PositiveIntegerField(default=0)
    rating = models.FloatField(default=0)
    num_reviews = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "products"
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of product."""
        return self.name

    def __repr__(self) -> str:
        """Return detailed representation of product."""
        return f"<Product(id={self.pk}, name='{self.name}', price={self.price})>"
