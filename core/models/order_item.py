"""Order line item model."""

from typing import ClassVar

from django.db import models

from core.models.order import Order
from core.models.product import Product


class OrderItem(models.Model):
    """One product/quantity/price triple within an order.

    ``price``, ``name`` and ``image`` are copied from the product when the
    order is submitted, so later catalog edits never change past orders.
    """

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name="items")
    product = models.ForeignKey(
        Product,
        on_delete=models.SET_NULL,
        null=True,
        related_name="order_items",
    )
    name = models.CharField(max_length=255)
    image = models.CharField(max_length=500, blank=True, default="")
    qty = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        """Django model metadata."""

        db_table = "order_items"
        ordering: ClassVar[list[str]] = ["id"]

    def __str__(self) -> str:
        """Return string representation of order item."""
        return f"{self.qty} x {self.name} @ {self.price}"
