"""Schema for login request."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class UserLoginRequest(BaseSchemaModel):
    """Credentials for email/password login."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
