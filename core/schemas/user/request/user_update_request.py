"""Schemas for partial user updates."""

from pydantic import EmailStr, Field, field_validator

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.request.password_policy import (
    blank_to_none,
    check_password_strength,
)


class UserUpdateRequest(BaseSchemaModel):
    """Profile update; omitted or blank fields keep their current value.

    The password policy is only applied when a new password is supplied.
    """

    username: str | None = Field(None, min_length=1, max_length=50)
    email: EmailStr | None = None
    password: str | None = None

    @field_validator("username", "email", "password", mode="before")
    @classmethod
    def ignore_blank(cls, value: object) -> object:
        """Map blank strings to None."""
        return blank_to_none(value)

    @field_validator("password")
    @classmethod
    def password_must_be_strong(cls, value: str | None) -> str | None:
        """Apply the shared password policy to a new password."""
        if value is None:
            return None
        return check_password_strength(value)


class AdminUserUpdateRequest(UserUpdateRequest):
    """Admin update of another user, which may also change the role."""

    is_admin: bool | None = None
