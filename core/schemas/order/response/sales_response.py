"""Admin sales statistics response schemas."""

import datetime

from core.schemas.base_schema_model import BaseSchemaModel, Money


class TotalOrdersResponse(BaseSchemaModel):
    """Number of orders ever placed."""

    total_orders: int


class TotalSalesResponse(BaseSchemaModel):
    """Sum of ``totalPrice`` over all orders."""

    total_sales: Money


class DailySales(BaseSchemaModel):
    """Paid revenue for one calendar day."""

    date: datetime.date
    total_sales: Money


class TotalSalesByDateResponse(BaseSchemaModel):
    """Paid revenue grouped by the day the payment arrived."""

    total_sales_by_date: list[DailySales]
