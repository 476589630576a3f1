"""Schema for user registration request."""

from pydantic import ConfigDict, EmailStr, Field, field_validator

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.user.request.password_policy import check_password_strength


class UserRegisterRequest(BaseSchemaModel):
    """Request schema for creating a new account."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "janedoe",
                "email": "jane@example.com",
                "password": "Str0ng!Pass",
            }
        }
    )

    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_must_be_strong(cls, value: str) -> str:
        """Apply the shared password policy."""
        return check_password_strength(value)
