"""Readiness response schema."""

from datetime import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health.dependency_health import DependencyHealth


class ReadinessResponse(BaseSchemaModel):
    """Readiness of the shop API and the backing stores it talks to.

    The service reports ``degraded`` instead of refusing traffic when the
    database or cache is down, so catalog pages can keep answering from
    whatever is still reachable.
    """

    ready: bool
    status: str = Field(..., description="'ready' or 'degraded'")
    degraded: bool
    database_monitor_active: bool = Field(
        False, description="Whether the background reconnect loop is running"
    )
    dependencies: dict[str, DependencyHealth]
    checked_at: datetime
