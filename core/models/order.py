"""Order model."""

from typing import ClassVar

from django.db import models

from core.models.user import User


class Order(models.Model):
    """A submitted order with its stored price totals.

    Totals are computed once at creation from snapshotted line item prices
    and never recomputed afterwards.
    """

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="orders")
    shipping_address = models.CharField(max_length=255)
    shipping_city = models.CharField(max_length=100)
    shipping_postal_code = models.CharField(max_length=20)
    shipping_country = models.CharField(max_length=100)
    payment_method = models.CharField(max_length=50)
    payment_result = models.JSONField(null=True, blank=True)
    items_price = models.DecimalField(max_digits=12, decimal_places=2)
    shipping_price = models.DecimalField(max_digits=12, decimal_places=2)
    tax_price = models.DecimalField(max_digits=12, decimal_places=2)
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    is_paid = models.BooleanField(default=False)
    paid_at = models.DateTimeField(null=True, blank=True)
    is_delivered = models.BooleanField(default=False)
    delivered_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Django model metadata."""

        db_table = "orders"
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of order."""
        return f"Order {self.pk} ({self.total_price})"

    def __repr__(self) -> str:
        """Return detailed representation of order."""
        return (
            f"<Order(id={self.pk}, user_id={self.user_id}, "
            f"total_price={self.total_price}, is_paid={self.is_paid})>"
        )
