"""Order request schemas."""

from core.schemas.order.request.order_request import (
    OrderCreateRequest,
    OrderItemRequest,
    Payer,
    PaymentResultRequest,
    ShippingAddress,
)

__all__ = [
    "OrderCreateRequest",
    "OrderItemRequest",
    "Payer",
    "PaymentResultRequest",
    "ShippingAddress",
]
