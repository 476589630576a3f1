"""Order response schemas."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from core.schemas.base_schema_model import BaseSchemaModel, Money
from core.schemas.order.request import ShippingAddress

if TYPE_CHECKING:
    from core.models import Order, OrderItem, User


class OrderUserSummary(BaseSchemaModel):
    """Buyer identity embedded in order responses."""

    id: int
    username: str
    email: str | None = None

    @classmethod
    def from_model(
        cls, user: "User", include_email: bool = False
    ) -> "OrderUserSummary":
        """Project the buyer, optionally including the email address."""
        return cls(
            id=user.pk,
            username=user.username,
            email=user.email if include_email else None,
        )


class OrderItemResponse(BaseSchemaModel):
    """Snapshotted order position."""

    product: int | None
    name: str
    image: str
    qty: int
    price: Money

    @classmethod
    def from_model(cls, item: "OrderItem") -> "OrderItemResponse":
        """Project an order item model onto the response schema."""
        return cls(
            product=item.product_id,
            name=item.name,
            image=item.image,
            qty=item.qty,
            price=item.price,
        )


class OrderResponse(BaseSchemaModel):
    """Public view of an order with its stored totals."""

    id: int
    user: OrderUserSummary
    order_items: list[OrderItemResponse]
    shipping_address: ShippingAddress
    payment_method: str
    payment_result: dict[str, Any] | None = None
    items_price: Money
    shipping_price: Money
    tax_price: Money
    total_price: Money
    is_paid: bool
    paid_at: datetime | None = None
    is_delivered: bool
    delivered_at: datetime | None = None
    created_at: datetime

    @classmethod
    def from_model(
        cls, order: "Order", include_user_email: bool = False
    ) -> "OrderResponse":
        """Project an order model onto the response schema."""
        return cls(
            id=order.pk,
            user=OrderUserSummary.from_model(order.user, include_user_email),
            order_items=[OrderItemResponse.from_model(i) for i in order.items.all()],
            shipping_address=ShippingAddress(
                address=order.shipping_address,
                city=order.shipping_city,
                postal_code=order.shipping_postal_code,
                country=order.shipping_country,
            ),
            payment_method=order.payment_method,
            payment_result=order.payment_result,
            items_price=order.items_price,
            shipping_price=order.shipping_price,
            tax_price=order.tax_price,
            total_price=order.total_price,
            is_paid=order.is_paid,
            paid_at=order.paid_at,
            is_delivered=order.is_delivered,
            delivered_at=order.delivered_at,
            created_at=order.created_at,
        )
