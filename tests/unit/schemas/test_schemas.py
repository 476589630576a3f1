"""Unit tests for request and response schemas."""

import unittest
from datetime import UTC, datetime
from decimal import Decimal

from pydantic import ValidationError

from core.schemas.category import CategoryCreateRequest
from core.schemas.common import MessageResponse, PaypalConfigResponse
from core.schemas.order import (
    OrderCreateRequest,
    OrderItemResponse,
    PaymentResultRequest,
)
from core.schemas.product import (
    ProductFilterRequest,
    ProductPageResponse,
    ProductUpdateRequest,
)
from core.schemas.review import ReviewCreateRequest, ReviewResponse
from core.schemas.user import (
    AdminUserUpdateRequest,
    UserRegisterRequest,
    UserUpdateRequest,
)


class TestUserSchemas(unittest.TestCase):
    """Test cases for user request schemas."""

    def test_register_accepts_strong_password(self):
        """Test a valid registration payload."""
        request = UserRegisterRequest(
            username=" jane ", email="jane@example.com", password="Str0ng!Pass"
        )

        self.assertEqual(request.username, "jane")

    def test_register_rejects_weak_passwords(self):
        """Test that each missing character class fails the policy."""
        for password in ("alllower1!", "ALLUPPER1!", "NoDigits!!", "NoSpecial11"):
            with self.subTest(password=password), self.assertRaises(ValidationError):
                UserRegisterRequest(
                    username="jane", email="jane@example.com", password=password
                )

    def test_register_rejects_short_password(self):
        """Test the minimum password length."""
        with self.assertRaises(ValidationError):
            UserRegisterRequest(
                username="jane", email="jane@example.com", password="S1!a"
            )

    def test_register_rejects_invalid_email(self):
        """Test that the email must be well formed."""
        with self.assertRaises(ValidationError):
            UserRegisterRequest(
                username="jane", email="not-an-email", password="Str0ng!Pass"
            )

    def test_update_treats_blank_as_missing(self):
        """Test that blank strings do not overwrite fields."""
        request = UserUpdateRequest(username="", email="  ", password="")

        self.assertIsNone(request.username)
        self.assertIsNone(request.email)
        self.assertIsNone(request.password)

    def test_update_checks_new_password(self):
        """Test that a supplied new password must be strong."""
        with self.assertRaises(ValidationError):
            UserUpdateRequest(password="weak")

    def test_admin_update_accepts_camel_case(self):
        """Test that isAdmin is read from the wire name."""
        request = AdminUserUpdateRequest.model_validate({"isAdmin": True})

        self.assertTrue(request.is_admin)


class TestCatalogSchemas(unittest.TestCase):
    """Test cases for category, product and review schemas."""

    def test_category_name_length(self):
        """Test that category names are limited to 32 characters."""
        with self.assertRaises(ValidationError):
            CategoryCreateRequest(name="x" * 33)

    def test_review_rating_range(self):
        """Test that ratings must be between 1 and 5."""
        for rating in (0, 6):
            with self.subTest(rating=rating), self.assertRaises(ValidationError):
                ReviewCreateRequest(rating=rating)
        self.assertEqual(ReviewCreateRequest(rating=5).comment, "")

    def test_update_quantity_must_be_positive(self):
        """Test that updates reject the quantities creation rejects."""
        for quantity in (0, -1):
            with self.subTest(quantity=quantity), self.assertRaises(ValidationError):
                ProductUpdateRequest(quantity=quantity)
        self.assertEqual(ProductUpdateRequest(quantity=1).quantity, 1)

    def test_filter_reads_wire_names(self):
        """Test that the filter accepts camelCase price bounds."""
        request = ProductFilterRequest.model_validate(
            {"category": "3", "minPrice": "10", "maxPrice": "20.5"}
        )

        self.assertEqual(request.category, 3)
        self.assertEqual(request.min_price, Decimal("10"))
        self.assertEqual(request.max_price, Decimal("20.5"))

    def test_empty_page_serialization(self):
        """Test the keys of a product page."""
        data = ProductPageResponse(
            products=[], page=1, pages=0, has_more=False, total=0
        ).to_response()

        self.assertEqual(
            data, {"products": [], "page": 1, "pages": 0, "hasMore": False, "total": 0}
        )


class TestOrderSchemas(unittest.TestCase):
    """Test cases for order schemas."""

    def _payload(self, **overrides):
        data = {
            "orderItems": [{"product": 1, "qty": 2}],
            "shippingAddress": {
                "address": "Main Street 1",
                "city": "Berlin",
                "postalCode": "10115",
                "country": "Germany",
            },
            "paymentMethod": "PayPal",
        }
        data.update(overrides)
        return data

    def test_order_request(self):
        """Test a valid order payload."""
        request = OrderCreateRequest.model_validate(self._payload())

        self.assertEqual(request.order_items[0].product, 1)
        self.assertEqual(request.shipping_address.postal_code, "10115")

    def test_item_accepts_legacy_id_key(self):
        """Test that items may reference the product as _id."""
        request = OrderCreateRequest.model_validate(
            self._payload(orderItems=[{"_id": 4, "qty": 1, "price": "0.01"}])
        )

        self.assertEqual(request.order_items[0].product, 4)

    def test_empty_order_is_rejected(self):
        """Test that at least one item is required."""
        with self.assertRaises(ValidationError):
            OrderCreateRequest.model_validate(self._payload(orderItems=[]))

    def test_quantity_must_be_positive(self):
        """Test that zero quantities are rejected."""
        with self.assertRaises(ValidationError):
            OrderCreateRequest.model_validate(
                self._payload(orderItems=[{"product": 1, "qty": 0}])
            )

    def test_payment_result_accepts_both_spellings(self):
        """Test snake_case and camelCase payment fields."""
        snake = PaymentResultRequest.model_validate(
            {
                "id": "P1",
                "status": "COMPLETED",
                "update_time": "now",
                "payer": {"email_address": "a@b.c"},
            }
        )
        camel = PaymentResultRequest.model_validate(
            {
                "id": "P1",
                "status": "COMPLETED",
                "updateTime": "now",
                "payer": {"emailAddress": "a@b.c"},
            }
        )

        self.assertEqual(snake, camel)

    def test_money_serializes_with_two_decimals(self):
        """Test that prices leave the API as two-decimal strings."""
        item = OrderItemResponse(
            product=1, name="Cap", image="/uploads/cap.png", qty=1, price=Decimal("5")
        )

        self.assertEqual(item.to_response()["price"], "5.00")


class TestCommonSchemas(unittest.TestCase):
    """Test cases for shared schemas."""

    def test_message_response(self):
        """Test the message payload."""
        self.assertEqual(
            MessageResponse(message="User removed").to_response(),
            {"message": "User removed"},
        )

    def test_paypal_config(self):
        """Test that the client id is exposed as clientId."""
        self.assertEqual(
            PaypalConfigResponse(client_id="abc").to_response(), {"clientId": "abc"}
        )

    def test_datetimes_serialize_as_iso(self):
        """Test that datetimes are rendered as ISO strings."""
        review = ReviewResponse(
            id=1,
            user=2,
            name="jane",
            rating=4,
            comment="",
            created_at=datetime(2024, 6, 1, tzinfo=UTC),
        )

        self.assertEqual(review.to_response()["createdAt"], "2024-06-01T00:00:00Z")


if __name__ == "__main__":
    unittest.main()
