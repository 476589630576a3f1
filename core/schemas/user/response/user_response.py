"""User response schemas."""

from datetime import datetime
from typing import TYPE_CHECKING

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel

if TYPE_CHECKING:
    from core.models import User


class UserResponse(BaseSchemaModel):
    """Public view of a user; the password hash is never exposed."""

    id: int
    username: str
    email: str
    is_admin: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_model(cls, user: "User") -> "UserResponse":
        """Project a user model onto the response schema."""
        return cls.model_validate(user)


class UserProfileResponse(BaseSchemaModel):
    """Trimmed view returned for the caller's own profile."""

    id: int
    username: str
    email: str
    is_admin: bool = Field(False)

    @classmethod
    def from_model(cls, user: "User") -> "UserProfileResponse":
        """Project a user model onto the profile schema."""
        return cls.model_validate(user)
