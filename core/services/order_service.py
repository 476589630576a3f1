"""Order submission, payment, delivery and sales statistics."""

from django.db import transaction
from django.utils import timezone

import structlog
from rest_framework.exceptions import PermissionDenied

from core.exceptions import ProductNotFoundError
from core.models import Order, OrderItem, User
from core.repositories import OrderRepository, ProductRepository
from core.schemas.order import (
    DailySales,
    LineItem,
    OrderCreateRequest,
    OrderResponse,
    PaymentResultRequest,
    TotalOrdersResponse,
    TotalSalesByDateResponse,
    TotalSalesResponse,
)
from core.services.price_calculator import calc_prices

logger = structlog.get_logger(__name__)


class OrderService:
    """Service for customer orders."""

    def create_order(self, actor: User, request: OrderCreateRequest) -> OrderResponse:
        """Submit an order priced from the current catalog.

        Client-supplied prices are never trusted: each line's price, name and
        image are copied from the product row, and the totals are computed
        from those snapshots.

        Args:
            actor: The buyer
            request: Validated order lines, address and payment method

        Returns:
            The stored order

        Raises:
            ProductNotFoundError: If a line references an unknown product
        """
        product_ids = [line.product for line in request.order_items]
        products = ProductRepository.get_many(product_ids)
        missing = [pid for pid in product_ids if pid not in products]
        if missing:
            raise ProductNotFoundError(missing[0])

        lines = [
            (products[line.product], line.qty) for line in request.order_items
        ]
        totals = calc_prices(
            LineItem(price=product.price, qty=qty) for product, qty in lines
        )

        address = request.shipping_address
        with transaction.atomic():
            order = Order.objects.create(
                user=actor,
                shipping_address=address.address,
                shipping_city=address.city,
                shipping_postal_code=address.postal_code,
                shipping_country=address.country,
                payment_method=request.payment_method,
                **totals.as_decimals(),
            )
            OrderItem.objects.bulk_create(
                OrderItem(
                    order=order,
                    product=product,
                    name=product.name,
                    image=product.image,
                    qty=qty,
                    price=product.price,
                )
                for product, qty in lines
            )

        logger.info(
            "order_created",
            order_id=order.pk,
            user_id=actor.pk,
            item_count=len(lines),
            total_price=totals.total_price,
        )
        return self.get_order(actor, order.pk)

    def list_orders(self) -> list[OrderResponse]:
        """Return every order (admin view)."""
        return [OrderResponse.from_model(o) for o in OrderRepository.list_all()]

    def list_user_orders(self, actor: User) -> list[OrderResponse]:
        """Return the caller's own orders."""
        return [OrderResponse.from_model(o) for o in OrderRepository.for_user(actor.pk)]

    def count_orders(self) -> TotalOrdersResponse:
        """Return the number of orders."""
        return TotalOrdersResponse(total_orders=OrderRepository.count())

    def total_sales(self) -> TotalSalesResponse:
        """Return the sum of all order totals."""
        return TotalSalesResponse(total_sales=OrderRepository.total_sales())

    def sales_by_date(self) -> TotalSalesByDateResponse:
        """Return paid revenue per payment day."""
        return TotalSalesByDateResponse(
            total_sales_by_date=[
                DailySales(date=day, total_sales=total)
                for day, total in OrderRepository.sales_by_paid_date()
            ]
        )

    def get_order(self, actor: User, order_id: int) -> OrderResponse:
        """Fetch an order visible to the caller.

        Raises:
            OrderNotFoundError: If the order does not exist
            PermissionDenied: If the caller neither owns it nor is an admin
        """
        order = self._get_visible_order(actor, order_id)
        return OrderResponse.from_model(order, include_user_email=True)

    def mark_paid(
        self, actor: User, order_id: int, payment: PaymentResultRequest
    ) -> OrderResponse:
        """Record a completed payment on an order.

        Args:
            actor: Owner of the order or an administrator
            order_id: Order being paid
            payment: Confirmation returned by the payment provider

        Returns:
            The updated order
        """
        order = self._get_visible_order(actor, order_id)
        order.is_paid = True
        order.paid_at = timezone.now()
        order.payment_result = {
            "id": payment.id,
            "status": payment.status,
            "update_time": payment.update_time,
            "email_address": payment.payer.email_address,
        }
        order.save(update_fields=["is_paid", "paid_at", "payment_result", "updated_at"])
        logger.info("order_paid", order_id=order.pk, user_id=actor.pk)
        return OrderResponse.from_model(order, include_user_email=True)

    def mark_delivered(self, actor: User, order_id: int) -> OrderResponse:
        """Flag an order as delivered (admin only)."""
        order = OrderRepository.get_by_id(order_id)
        order.is_delivered = True
        order.delivered_at = timezone.now()
        order.save(update_fields=["is_delivered", "delivered_at", "updated_at"])
        logger.info("order_delivered", order_id=order.pk, admin_id=actor.pk)
        return OrderResponse.from_model(order, include_user_email=True)

    @staticmethod
    def _get_visible_order(actor: User, order_id: int) -> Order:
        order = OrderRepository.get_by_id(order_id)
        if order.user_id != actor.pk and not actor.is_admin:
            logger.warning(
                "order_access_denied", order_id=order_id, user_id=actor.pk
            )
            raise PermissionDenied("Not authorized to access this order")
        return order


# Global order service instance
order_service = OrderService()
