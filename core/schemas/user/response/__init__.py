"""User response schemas."""

from core.schemas.user.response.user_response import (
    UserProfileResponse,
    UserResponse,
)

__all__ = ["UserProfileResponse", "UserResponse"]
