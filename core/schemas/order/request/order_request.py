"""Schemas for order submission and payment requests."""

from pydantic import AliasChoices, ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class OrderItemRequest(BaseSchemaModel):
    """One requested position; the price always comes from the catalog."""

    product: int = Field(
        ...,
        validation_alias=AliasChoices("product", "_id", "id"),
        description="Product id",
    )
    qty: int = Field(..., gt=0)


class ShippingAddress(BaseSchemaModel):
    """Delivery address for an order."""

    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    postal_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=100)


class OrderCreateRequest(BaseSchemaModel):
    """Request schema for submitting an order."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "orderItems": [{"product": 1, "qty": 2}],
                "shippingAddress": {
                    "address": "Main Street 1",
                    "city": "Berlin",
                    "postalCode": "10115",
                    "country": "Germany",
                },
                "paymentMethod": "PayPal",
            }
        }
    )

    order_items: list[OrderItemRequest] = Field(..., min_length=1)
    shipping_address: ShippingAddress
    payment_method: str = Field(..., min_length=1, max_length=50)


class Payer(BaseSchemaModel):
    """Payer block of a payment provider callback."""

    email_address: str = Field(
        ..., validation_alias=AliasChoices("email_address", "emailAddress")
    )


class PaymentResultRequest(BaseSchemaModel):
    """Payment confirmation forwarded by the storefront after checkout."""

    id: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)
    update_time: str = Field(
        ..., validation_alias=AliasChoices("update_time", "updateTime")
    )
    payer: Payer
