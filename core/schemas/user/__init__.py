"""User schemas."""

from core.schemas.user.request import (
    AdminUserUpdateRequest,
    UserLoginRequest,
    UserRegisterRequest,
    UserUpdateRequest,
)
from core.schemas.user.response import UserProfileResponse, UserResponse

__all__ = [
    "AdminUserUpdateRequest",
    "UserLoginRequest",
    "UserProfileResponse",
    "UserRegisterRequest",
    "UserResponse",
    "UserUpdateRequest",
]
