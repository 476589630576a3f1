"""Price totals derived from an order's line items."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class LineItem(BaseModel):
    """Price and quantity of one order position."""

    model_config = ConfigDict(frozen=True)

    price: Decimal
    qty: int


class OrderTotals(BaseSchemaModel):
    """Order totals as two-decimal strings.

    Serialized as ``itemsPrice``, ``shippingPrice``, ``taxPrice`` and
    ``totalPrice``.
    """

    model_config = ConfigDict(frozen=True)

    items_price: str = Field(..., pattern=r"^-?\d+\.\d{2}$")
    shipping_price: str = Field(..., pattern=r"^-?\d+\.\d{2}$")
    tax_price: str = Field(..., pattern=r"^-?\d+\.\d{2}$")
    total_price: str = Field(..., pattern=r"^-?\d+\.\d{2}$")

    def as_decimals(self) -> dict[str, Decimal]:
        """Return the four totals as Decimals keyed by field name."""
        return {
            "items_price": Decimal(self.items_price),
            "shipping_price": Decimal(self.shipping_price),
            "tax_price": Decimal(self.tax_price),
            "total_price": Decimal(self.total_price),
        }
