"""Unit tests for order price calculation."""

import random
import unittest
from decimal import Decimal

from core.schemas.order import LineItem, OrderTotals
from core.services.price_calculator import (
    calc_prices,
    format_money,
    items_subtotal,
    round_money,
)


def _lines(*pairs):
    return [LineItem(price=Decimal(str(price)), qty=qty) for price, qty in pairs]


class TestCalcPrices(unittest.TestCase):
    """Test cases for calc_prices."""

    def test_empty_order_pays_only_shipping(self):
        """Test that an empty order costs exactly the shipping fee."""
        totals = calc_prices([])

        self.assertEqual(totals.items_price, "0.00")
        self.assertEqual(totals.shipping_price, "10.00")
        self.assertEqual(totals.tax_price, "0.00")
        self.assertEqual(totals.total_price, "10.00")

    def test_small_order_totals(self):
        """Test totals for two lines below the free shipping threshold."""
        totals = calc_prices(_lines((10, 2), (5, 1)))

        self.assertEqual(
            totals,
            OrderTotals(
                items_price="25.00",
                shipping_price="10.00",
                tax_price="4.75",
                total_price="39.75",
            ),
        )

    def test_shipping_is_free_above_threshold(self):
        """Test that orders over 100 ship for free."""
        totals = calc_prices(_lines((50.01, 2)))

        self.assertEqual(totals.items_price, "100.02")
        self.assertEqual(totals.shipping_price, "0.00")

    def test_shipping_is_charged_at_exactly_threshold(self):
        """Test that an items total of exactly 100 still pays shipping."""
        totals = calc_prices(_lines((100, 1)))

        self.assertEqual(totals.shipping_price, "10.00")
        self.assertEqual(totals.tax_price, "19.00")
        self.assertEqual(totals.total_price, "129.00")

    def test_tax_rounds_half_up(self):
        """Test that tax of 0.095 rounds up to 0.10."""
        totals = calc_prices(_lines((0.5, 1)))

        self.assertEqual(totals.tax_price, "0.10")

    def test_fractional_prices_do_not_drift(self):
        """Test that binary-unfriendly prices sum exactly."""
        totals = calc_prices(_lines((0.1, 3), (0.2, 1)))

        self.assertEqual(totals.items_price, "0.50")

    def test_accepts_generators(self):
        """Test that items may be any iterable, consumed once."""
        totals = calc_prices(line for line in _lines((10, 2), (5, 1)))

        self.assertEqual(totals.total_price, "39.75")

    def test_total_equals_sum_of_components(self):
        """Test that total equals items + shipping + tax, and shipping rule holds."""
        rng = random.Random(1234)
        for _ in range(300):
            count = rng.randint(0, 6)
            lines = _lines(
                *(
                    (Decimal(rng.randint(1, 20000)) / 100, rng.randint(1, 9))
                    for _ in range(count)
                )
            )
            totals = calc_prices(lines).as_decimals()

            self.assertEqual(
                totals["total_price"],
                totals["items_price"] + totals["shipping_price"] + totals["tax_price"],
            )
            if totals["items_price"] > 100:
                self.assertEqual(totals["shipping_price"], Decimal("0.00"))
            else:
                self.assertEqual(totals["shipping_price"], Decimal("10.00"))

    def test_all_values_have_two_fraction_digits(self):
        """Test that every value is formatted with exactly two decimals."""
        totals = calc_prices(_lines((3.333, 3)))

        for value in (
            totals.items_price,
            totals.shipping_price,
            totals.tax_price,
            totals.total_price,
        ):
            self.assertRegex(value, r"^\d+\.\d{2}$")

    def test_serializes_with_camel_case_keys(self):
        """Test that the response keys match the public JSON names."""
        data = calc_prices(_lines((10, 1))).to_response()

        self.assertEqual(
            set(data), {"itemsPrice", "shippingPrice", "taxPrice", "totalPrice"}
        )


class TestMoneyHelpers(unittest.TestCase):
    """Test cases for the rounding helpers."""

    def test_round_money_rounds_half_away_from_zero(self):
        """Test that 2.345 rounds to 2.35."""
        self.assertEqual(round_money(Decimal("2.345")), Decimal("2.35"))

    def test_format_money_pads_fraction(self):
        """Test that whole numbers get two fraction digits."""
        self.assertEqual(format_money(Decimal("7")), "7.00")

    def test_items_subtotal_multiplies_price_by_qty(self):
        """Test that the subtotal is price times quantity, unrounded."""
        lines = [LineItem(price=Decimal("19.99"), qty=3)]
        self.assertEqual(items_subtotal(lines), Decimal("59.97"))


if __name__ == "__main__":
    unittest.main()
