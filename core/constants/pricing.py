"""Order pricing constants."""

from decimal import Decimal

# Orders above this items total ship for free
FREE_SHIPPING_THRESHOLD = Decimal("100")
SHIPPING_FEE = Decimal("10")
TAX_RATE = Decimal("0.19")

# Two fraction digits for every money value leaving the calculator
MONEY_QUANTUM = Decimal("0.01")
