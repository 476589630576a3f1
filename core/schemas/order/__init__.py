"""Order schemas."""

from core.schemas.order.order_totals import LineItem, OrderTotals
from core.schemas.order.request import (
    OrderCreateRequest,
    OrderItemRequest,
    Payer,
    PaymentResultRequest,
    ShippingAddress,
)
from core.schemas.order.response import (
    DailySales,
    OrderItemResponse,
    OrderResponse,
    OrderUserSummary,
    TotalOrdersResponse,
    TotalSalesByDateResponse,
    TotalSalesResponse,
)

__all__ = [
    "DailySales",
    "LineItem",
    "OrderCreateRequest",
    "OrderItemRequest",
    "OrderItemResponse",
    "OrderResponse",
    "OrderTotals",
    "OrderUserSummary",
    "Payer",
    "PaymentResultRequest",
    "ShippingAddress",
    "TotalOrdersResponse",
    "TotalSalesByDateResponse",
    "TotalSalesResponse",
]
