"""User model."""

from typing import ClassVar

from django.contrib.auth.hashers import check_password, make_password
from django.db import models

from core.enums import UserRole


class User(models.Model):
    """Shop customer or administrator.

    Passwords are stored as Django password hashes; the raw password never
    leaves the request that supplied it.
    """

    role = models.CharField(
        max_length=10,
        choices=[(role.value, role.value) for role in UserRole],
        default=UserRole.USER.value,
    )
    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(max_length=255, unique=True)
    password_hash = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    # Authenticated principals handed to DRF permission classes
    is_authenticated = True
    is_anonymous = False

    class Meta:
        """Django model metadata."""

        db_table = "users"
        ordering: ClassVar[list[str]] = ["-created_at"]

    @property
    def is_admin(self) -> bool:
        """Whether the user holds the admin role."""
        return self.role == UserRole.ADMIN.value

    def set_password(self, raw_password: str) -> None:
        """Hash and store a new password."""
        self.password_hash = make_password(raw_password)

    def check_password(self, raw_password: str) -> bool:
        """Verify a raw password against the stored hash."""
        return check_password(raw_password, self.password_hash)

    def __str__(self) -> str:
        """Return string representation of user."""
        return f"{self.username} ({self.email})"

    def __repr__(self) -> str:
        """Return detailed representation of user."""
        return f"<User(id={self.pk}, username='{self.username}')>"
