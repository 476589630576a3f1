"""Django application configuration for core."""

import logging

from django.apps import AppConfig
from django.conf import settings

from core.services import database_monitor, health_service

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the shop core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Shop core"

    def ready(self) -> None:
        """Configure logging and wire the health checks once apps are loaded."""
        if not getattr(settings, "TEST_MODE", False):
            from core.logging import setup_logging  # noqa: PLC0415

            setup_logging()

        health_service.set_database_monitor(database_monitor)
        logger.info("Database monitoring service initialized")
