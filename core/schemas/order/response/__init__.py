"""Order response schemas."""

from core.schemas.order.response.order_response import (
    OrderItemResponse,
    OrderResponse,
    OrderUserSummary,
)
from core.schemas.order.response.sales_response import (
    DailySales,
    TotalOrdersResponse,
    TotalSalesByDateResponse,
    TotalSalesResponse,
)

__all__ = [
    "DailySales",
    "OrderItemResponse",
    "OrderResponse",
    "OrderUserSummary",
    "TotalOrdersResponse",
    "TotalSalesByDateResponse",
    "TotalSalesResponse",
]
