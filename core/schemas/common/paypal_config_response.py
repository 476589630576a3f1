"""PayPal client configuration response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class PaypalConfigResponse(BaseSchemaModel):
    """Public PayPal client id for the storefront checkout."""

    client_id: str = Field(..., description="PayPal client id")
