"""User request schemas."""

from core.schemas.user.request.user_login_request import UserLoginRequest
from core.schemas.user.request.user_register_request import UserRegisterRequest
from core.schemas.user.request.user_update_request import (
    AdminUserUpdateRequest,
    UserUpdateRequest,
)

__all__ = [
    "AdminUserUpdateRequest",
    "UserLoginRequest",
    "UserRegisterRequest",
    "UserUpdateRequest",
]
