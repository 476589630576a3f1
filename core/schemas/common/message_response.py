"""Plain message response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class MessageResponse(BaseSchemaModel):
    """Response carrying a single human readable message."""

    message: str = Field(..., description="Outcome of the operation")
