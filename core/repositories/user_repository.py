"""Repository for user-related database queries."""

from django.db.models import QuerySet

from core.exceptions import UserNotFoundError
from core.models import User


class UserRepository:
    """Repository for encapsulating user database queries."""

    @staticmethod
    def get_by_id(user_id: int) -> User:
        """Fetch a user by primary key.

        Args:
            user_id: Primary key of the user

        Returns:
            The matching User

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = User.objects.filter(pk=user_id).first()
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def get_by_email(email: str) -> User | None:
        """Look up a user by email address (case-insensitive)."""
        return User.objects.filter(email__iexact=email).first()

    @staticmethod
    def list_all() -> QuerySet[User]:
        """Return every user, newest first."""
        return User.objects.all()

    @staticmethod
    def email_taken(email: str, exclude_id: int | None = None) -> bool:
        """Check whether another user already uses ``email``.

        Args:
            email: Email address to check
            exclude_id: User to ignore, typically the one being updated

        Returns:
            True if a different user holds the address
        """
        queryset = User.objects.filter(email__iexact=email)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()

    @staticmethod
    def username_taken(username: str, exclude_id: int | None = None) -> bool:
        """Check whether another user already uses ``username``."""
        queryset = User.objects.filter(username=username)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()
