"""Unit tests for the repositories."""

import datetime
from decimal import Decimal

from django.utils import timezone

from core.exceptions import CategoryNotFoundError, UserNotFoundError
from core.repositories import (
    CategoryRepository,
    OrderRepository,
    ProductRepository,
    UserRepository,
)
from tests.base import BaseUnitTest
from tests.factories import make_category, make_order, make_product, make_user


class TestUserRepository(BaseUnitTest):
    """Test cases for UserRepository."""

    def test_email_lookup_is_case_insensitive(self):
        """Test that emails match regardless of case."""
        user = make_user(email="Jane@Example.com")

        self.assertEqual(UserRepository.get_by_email("jane@example.com").pk, user.pk)
        self.assertTrue(UserRepository.email_taken("JANE@example.com"))

    def test_email_taken_excludes_self(self):
        """Test that a user's own email does not count as taken."""
        user = make_user()

        self.assertFalse(UserRepository.email_taken(user.email, exclude_id=user.pk))

    def test_missing_user(self):
        """Test that an unknown id raises UserNotFoundError."""
        with self.assertRaises(UserNotFoundError):
            UserRepository.get_by_id(424242)


class TestCategoryRepository(BaseUnitTest):
    """Test cases for CategoryRepository."""

    def test_name_taken(self):
        """Test the case-insensitive name check."""
        category = make_category(name="Garden")

        self.assertTrue(CategoryRepository.name_taken("garden"))
        self.assertFalse(
            CategoryRepository.name_taken("garden", exclude_id=category.pk)
        )

    def test_missing_category(self):
        """Test that an unknown id raises CategoryNotFoundError."""
        with self.assertRaises(CategoryNotFoundError):
            CategoryRepository.get_by_id(424242)


class TestProductRepository(BaseUnitTest):
    """Test cases for ProductRepository."""

    def test_list_queries_are_constant(self):
        """Test that category and reviews are loaded in batch."""
        for _ in range(3):
            make_product()

        with self.assertNumQueries(2):
            products = list(ProductRepository.search(None))
            for product in products:
                _ = product.category.name if product.category else None
                _ = list(product.reviews.all())

    def test_get_many(self):
        """Test the batch lookup keyed by id."""
        first, second = make_product(), make_product()

        found = ProductRepository.get_many([first.pk, second.pk, 424242])

        self.assertEqual(set(found), {first.pk, second.pk})


class TestOrderRepository(BaseUnitTest):
    """Test cases for OrderRepository."""

    def test_sales_by_paid_date_skips_unpaid(self):
        """Test that unpaid orders are excluded from daily sales."""
        buyer = make_user()
        paid_at = timezone.make_aware(datetime.datetime(2024, 1, 5, 8, 0))
        make_order(buyer, total_price=Decimal("20.00"), is_paid=True, paid_at=paid_at)
        make_order(buyer, total_price=Decimal("99.00"))

        self.assertEqual(
            OrderRepository.sales_by_paid_date(),
            [(datetime.date(2024, 1, 5), Decimal("20.00"))],
        )

    def test_total_sales_defaults_to_zero(self):
        """Test the sum over an empty table."""
        self.assertEqual(OrderRepository.total_sales(), Decimal("0"))
