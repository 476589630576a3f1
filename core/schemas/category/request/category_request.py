"""Schemas for category create and update requests."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class CategoryCreateRequest(BaseSchemaModel):
    """Request schema for creating a category."""

    name: str = Field(..., min_length=1, max_length=32)
    description: str = Field("", max_length=2000)


class CategoryUpdateRequest(BaseSchemaModel):
    """Partial category update; omitted fields are left untouched."""

    name: str | None = Field(None, min_length=1, max_length=32)
    description: str | None = Field(None, max_length=2000)
