"""Enumerations for the core app."""

from core.enums.health_status import HealthStatus
from core.enums.user_role import UserRole

__all__ = ["HealthStatus", "UserRole"]
