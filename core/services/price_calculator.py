"""Order price calculation.

Pure functions only: no database access and no logging, so the same rules
apply to persisted orders, previews and tests.
"""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

from core.constants import (
    FREE_SHIPPING_THRESHOLD,
    MONEY_QUANTUM,
    SHIPPING_FEE,
    TAX_RATE,
)
from core.schemas.order import OrderTotals


class PricedLine(Protocol):
    """Anything carrying a unit price and a quantity."""

    price: Decimal
    qty: int


def round_money(value: Decimal) -> Decimal:
    """Round to two decimal places, halves away from zero."""
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """Format a rounded money value with exactly two fraction digits."""
    return f"{round_money(value):.2f}"


def items_subtotal(items: Iterable[PricedLine]) -> Decimal:
    """Sum ``price * qty`` over all lines without rounding."""
    return sum(
        (Decimal(str(item.price)) * item.qty for item in items),
        start=Decimal("0"),
    )


def calc_prices(items: Iterable[PricedLine]) -> OrderTotals:
    """Compute order totals from line items.

    Shipping is waived when the unrounded items total exceeds the free
    shipping threshold. Tax is a fixed rate on the items total. The grand
    total is the sum of the three rounded components, so it always equals
    ``itemsPrice + shippingPrice + taxPrice`` exactly.

    Quantities and prices are not range checked.

    Args:
        items: Line items with ``price`` and ``qty``.

    Returns:
        OrderTotals with every value formatted to two decimals.
    """
    items_price = items_subtotal(items)
    shipping_price = (
        Decimal("0") if items_price > FREE_SHIPPING_THRESHOLD else SHIPPING_FEE
    )
    tax_price = round_money(items_price * TAX_RATE)
    rounded_items = round_money(items_price)
    total_price = round_money(rounded_items + shipping_price + tax_price)

    return OrderTotals(
        items_price=format_money(rounded_items),
        shipping_price=format_money(shipping_price),
        tax_price=format_money(tax_price),
        total_price=format_money(total_price),
    )
