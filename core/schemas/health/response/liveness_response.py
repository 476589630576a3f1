"""Liveness response schema."""

from datetime import datetime

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class LivenessResponse(BaseSchemaModel):
    """Response model for liveness checks."""

    status: str = Field(..., description="Liveness status, always 'alive'")
    service: str = Field(..., description="Name of the running service")
    uptime_seconds: float = Field(..., description="Seconds since process start")
    timestamp: datetime
