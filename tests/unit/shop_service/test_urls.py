"""Unit tests for URL routing."""

import unittest

from django.urls import resolve, reverse

from core import views


class TestUrls(unittest.TestCase):
    """Test cases for the route table."""

    def test_reverse_static_routes(self):
        """Test the paths of routes without parameters."""
        expected = {
            "health-live": "/health/live",
            "health-ready": "/health/ready",
            "user-list": "/api/users",
            "user-login": "/api/users/auth",
            "user-logout": "/api/users/logout",
            "user-profile": "/api/users/profile",
            "category-list": "/api/category/categories",
            "category-create": "/api/category",
            "product-list": "/api/products",
            "product-all": "/api/products/allproducts",
            "product-top": "/api/products/top",
            "product-new": "/api/products/new",
            "product-filter": "/api/products/filtered-products",
            "upload-image": "/api/upload",
            "order-list": "/api/orders",
            "order-mine": "/api/orders/mine",
            "order-total-orders": "/api/orders/total-orders",
            "order-total-sales": "/api/orders/total-sales",
            "order-total-sales-by-date": "/api/orders/total-sales-by-date",
            "config-paypal": "/api/config/paypal",
        }
        for name, path in expected.items():
            with self.subTest(name=name):
                self.assertEqual(reverse(name), path)

    def test_reverse_parameterized_routes(self):
        """Test routes that take an id."""
        self.assertEqual(reverse("user-detail", args=[3]), "/api/users/3")
        self.assertEqual(
            reverse("product-reviews", args=[5]), "/api/products/5/reviews"
        )
        self.assertEqual(reverse("order-pay", args=[7]), "/api/orders/7/pay")
        self.assertEqual(reverse("order-deliver", args=[7]), "/api/orders/7/deliver")

    def test_named_product_routes_win_over_ids(self):
        """Test that fixed product paths are not parsed as ids."""
        self.assertIs(
            resolve("/api/products/top").func.view_class, views.TopProductsView
        )
        self.assertIs(
            resolve("/api/products/7").func.view_class, views.ProductDetailView
        )

    def test_sorted_routes_carry_sort_key(self):
        """Test that each sorted listing is bound to its ordering."""
        for key in ("name-asc", "name-desc", "price-asc", "price-desc"):
            with self.subTest(key=key):
                match = resolve(f"/api/products/{key}")
                self.assertEqual(match.func.view_initkwargs["sort_key"], key)


if __name__ == "__main__":
    unittest.main()
