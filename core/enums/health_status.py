"""States reported for the database and cache in readiness checks."""

from enum import Enum


class HealthStatus(str, Enum):
    """Outcome of a single dependency probe."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    ERROR = "error"
