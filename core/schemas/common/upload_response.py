"""Image upload response schema."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UploadResponse(BaseSchemaModel):
    """Result of a successful image upload."""

    message: str = Field(..., description="Outcome of the upload")
    image: str = Field(..., description="Public path of the stored image")
