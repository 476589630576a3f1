"""User role enumeration."""

from enum import Enum


class UserRole(str, Enum):
    """Role stored on every shop user."""

    ADMIN = "ADMIN"
    USER = "USER"
