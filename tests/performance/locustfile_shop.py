"""Performance tests for the shop service using Locust.

Usage:
    # Start the Django server first
    shop-local

    # In another terminal
    locust -f tests/performance/locustfile_shop.py --host http://localhost:8000
"""

import random

from locust import HttpUser, task

from tests.performance.common import BasePerformanceUser


class HealthCheckUser(HttpUser):
    """Simulates orchestrator probes."""

    @task(2)
    def check_liveness(self):
        """Load test the liveness check endpoint."""
        self.client.get("/health/live")

    @task(1)
    def check_readiness(self):
        """Load test the readiness check endpoint."""
        self.client.get("/health/ready")


class CatalogBrowsingUser(BasePerformanceUser):
    """Simulates shoppers browsing the catalog."""

    product_ids: list[int] = []

    @task(4)
    def list_products(self):
        """Load test the paginated, searchable product listing."""
        response = self.client.get(
            "/api/products",
            params={"keyword": random.choice(["", "shirt", "mug"])},
            name="/api/products",
        )
        if response.status_code == 200:
            self.product_ids = [p["id"] for p in response.json()["products"]]

    @task(2)
    def product_detail(self):
        """Load test the product detail endpoint."""
        if self.product_ids:
            product_id = random.choice(self.product_ids)
            self.client.get(f"/api/products/{product_id}", name="/api/products/[id]")

    @task(1)
    def highlights(self):
        """Load test the top and newest product listings."""
        self.client.get("/api/products/top")
        self.client.get("/api/products/new")

    @task(1)
    def categories(self):
        """Load test the category listing."""
        self.client.get("/api/category/categories")

    @task(1)
    def my_orders(self):
        """Load test the order history of a logged-in shopper."""
        if self.logged_in:
            self.client.get("/api/orders/mine")
