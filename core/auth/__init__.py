"""Authentication and authorization for the shop service."""

from core.auth.jwt_auth import (
    JWTAuthentication,
    clear_token_cookie,
    issue_token,
    set_token_cookie,
)
from core.auth.permissions import IsAdmin

__all__ = [
    "IsAdmin",
    "JWTAuthentication",
    "clear_token_cookie",
    "issue_token",
    "set_token_cookie",
]
