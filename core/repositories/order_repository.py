"""Repository for order database queries and sales statistics."""

import datetime
from decimal import Decimal

from django.db.models import QuerySet, Sum
from django.db.models.functions import TruncDate

from core.exceptions import OrderNotFoundError
from core.models import Order


class OrderRepository:
    """Repository for encapsulating order database queries."""

    @staticmethod
    def with_details() -> QuerySet[Order]:
        """Base queryset with the buyer joined and items prefetched."""
        return Order.objects.select_related("user").prefetch_related("items")

    @classmethod
    def get_by_id(cls, order_id: int) -> Order:
        """Fetch an order with its buyer and items.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        order = cls.with_details().filter(pk=order_id).first()
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    @classmethod
    def list_all(cls) -> QuerySet[Order]:
        """Every order, newest first."""
        return cls.with_details().order_by("-created_at", "-id")

    @classmethod
    def for_user(cls, user_id: int) -> QuerySet[Order]:
        """Orders placed by one user, newest first."""
        return cls.with_details().filter(user_id=user_id).order_by("-created_at", "-id")

    @staticmethod
    def count() -> int:
        """Number of orders ever placed."""
        return Order.objects.count()

    @staticmethod
    def total_sales() -> Decimal:
        """Sum of ``total_price`` across all orders."""
        total = Order.objects.aggregate(total=Sum("total_price"))["total"]
        return total if total is not None else Decimal("0")

    @staticmethod
    def sales_by_paid_date() -> list[tuple[datetime.date, Decimal]]:
        """Paid revenue grouped by the calendar day of payment.

        Returns:
            ``(date, total)`` pairs in ascending date order
        """
        rows = (
            Order.objects.filter(is_paid=True, paid_at__isnull=False)
            .annotate(day=TruncDate("paid_at"))
            .values("day")
            .annotate(total=Sum("total_price"))
            .order_by("day")
        )
        return [(row["day"], row["total"]) for row in rows]
