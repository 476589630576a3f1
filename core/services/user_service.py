"""Account registration, login and user administration."""

from django.db import IntegrityError, transaction

import structlog

from core.enums import UserRole
from core.exceptions import BusinessRuleError, ConflictError
from core.models import User
from core.repositories import UserRepository
from core.schemas.user import (
    AdminUserUpdateRequest,
    UserLoginRequest,
    UserRegisterRequest,
    UserProfileResponse,
    UserResponse,
    UserUpdateRequest,
)

logger = structlog.get_logger(__name__)


class UserService:
    """Service for user accounts.

    Email and username uniqueness is checked up front for a clear error
    message and enforced again by the database unique constraints, whose
    violations surface as ConflictError as well.
    """

    def register(self, request: UserRegisterRequest) -> User:
        """Create a regular user account.

        Args:
            request: Validated registration data

        Returns:
            The created User

        Raises:
            ConflictError: If the email or username is already taken
        """
        self._ensure_unique(request.email, request.username)

        user = User(username=request.username, email=request.email)
        user.set_password(request.password)
        self._save(user)

        logger.info("user_registered", user_id=user.pk, username=user.username)
        return user

    def authenticate(self, request: UserLoginRequest) -> User | None:
        """Check login credentials.

        Args:
            request: Validated email and password

        Returns:
            The matching User, or None when the email is unknown or the
            password does not match
        """
        user = UserRepository.get_by_email(request.email)
        if user is None or not user.check_password(request.password):
            logger.info("login_failed", email=request.email)
            return None
        logger.info("login_succeeded", user_id=user.pk)
        return user

    def list_users(self) -> list[UserResponse]:
        """Return all users."""
        return [UserResponse.from_model(u) for u in UserRepository.list_all()]

    def get_user(self, user_id: int) -> UserResponse:
        """Fetch one user or raise UserNotFoundError."""
        return UserResponse.from_model(UserRepository.get_by_id(user_id))

    def update_profile(
        self, actor: User, request: UserUpdateRequest
    ) -> UserProfileResponse:
        """Apply a partial update to the caller's own account.

        Args:
            actor: The authenticated user
            request: Fields to change; None means keep

        Returns:
            The updated profile
        """
        self._apply_update(actor, request)
        logger.info("profile_updated", user_id=actor.pk)
        return UserProfileResponse.from_model(actor)

    def update_user(
        self, actor: User, user_id: int, request: AdminUserUpdateRequest
    ) -> UserResponse:
        """Admin update of any account, including its role.

        Args:
            actor: The administrator performing the change
            user_id: Account to change
            request: Fields to change; None means keep

        Returns:
            The updated User
        """
        user = UserRepository.get_by_id(user_id)
        if request.is_admin is not None:
            role = UserRole.ADMIN if request.is_admin else UserRole.USER
            user.role = role.value
        self._apply_update(user, request)
        logger.info(
            "user_updated_by_admin",
            user_id=user.pk,
            admin_id=actor.pk,
            is_admin=user.is_admin,
        )
        return UserResponse.from_model(user)

    def delete_user(self, actor: User, user_id: int) -> None:
        """Delete a regular user account.

        Raises:
            UserNotFoundError: If the user does not exist
            BusinessRuleError: If the target is an administrator
        """
        user = UserRepository.get_by_id(user_id)
        if user.is_admin:
            raise BusinessRuleError("Cannot delete admin user")
        user.delete()
        logger.info("user_deleted", user_id=user_id, admin_id=actor.pk)

    def create_admin(
        self, username: str, email: str, password: str
    ) -> tuple[User, bool]:
        """Create an administrator, or promote and reset the existing account.

        The account is matched by email first and then by username.

        Returns:
            ``(user, created)``
        """
        user = UserRepository.get_by_email(email)
        if user is None:
            user = User.objects.filter(username=username).first()
        created = user is None
        if user is None:
            user = User(username=username, email=email)
        user.role = UserRole.ADMIN.value
        user.set_password(password)
        self._save(user)
        logger.info("admin_account_ready", user_id=user.pk, created=created)
        return user, created

    def _apply_update(self, user: User, request: UserUpdateRequest) -> None:
        username = request.username
        email = request.email
        if email is not None and UserRepository.email_taken(email, exclude_id=user.pk):
            raise ConflictError("Email already in use", detail=email)
        if username is not None and UserRepository.username_taken(
            username, exclude_id=user.pk
        ):
            raise ConflictError("Username already in use", detail=username)

        if username is not None:
            user.username = username
        if email is not None:
            user.email = email
        if request.password is not None:
            user.set_password(request.password)
        self._save(user)

    def _ensure_unique(self, email: str, username: str) -> None:
        if UserRepository.email_taken(email):
            raise ConflictError("User already exists", detail=email)
        if UserRepository.username_taken(username):
            raise ConflictError("Username already in use", detail=username)

    @staticmethod
    def _save(user: User) -> None:
        try:
            with transaction.atomic():
                user.save()
        except IntegrityError as e:
            logger.warning("user_unique_violation", error=str(e))
            raise ConflictError("User already exists", detail=str(e)) from e


# Global user service instance
user_service = UserService()
