"""DRF permission classes."""

from rest_framework.permissions import BasePermission


class IsAdmin(BasePermission):
    """Allow access only to authenticated administrators.

    Anonymous requests fail with 401 through ``IsAuthenticated`` when the two
    are combined; on its own an anonymous request is rejected with 403.
    """

    message = "Not authorized as an admin."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.is_admin)
