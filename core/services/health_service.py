"""Liveness and readiness checks for the shop API."""

import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime

from django.conf import settings
from django.core.cache import cache
from django.db import connection
from django.db.utils import OperationalError

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.services.database_monitor import DatabaseMonitor

logger = logging.getLogger(__name__)

_CACHE_PROBE_KEY = "shop:health:probe"


class HealthService:
    """Probes the database and cache, memoizing results for a short TTL."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: How long a probe result is reused
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._started_at = time.monotonic()
        self._results: dict[str, tuple[float, DependencyHealth]] = {}
        self._database_monitor: DatabaseMonitor | None = None

    def set_database_monitor(self, monitor: DatabaseMonitor) -> None:
        """Attach the monitor started when the database goes away."""
        self._database_monitor = monitor

    def reset(self) -> None:
        """Forget memoized probe results."""
        self._results.clear()

    def get_liveness_status(self) -> LivenessResponse:
        """Report that the process is up. Never touches dependencies."""
        return LivenessResponse(
            status="alive",
            service=settings.SERVICE_NAME,
            uptime_seconds=round(time.monotonic() - self._started_at, 3),
            timestamp=datetime.now(UTC),
        )

    def get_readiness_status(self) -> ReadinessResponse:
        """Probe dependencies and summarize them.

        The service stays ready while degraded so that a database outage
        does not take the whole storefront out of the load balancer.

        Returns:
            ReadinessResponse with per-dependency results
        """
        dependencies = {
            "database": self.check_database_health(),
            "cache": self.check_cache_health(),
        }
        degraded = not all(dep.healthy for dep in dependencies.values())
        monitor = self._database_monitor
        return ReadinessResponse(
            ready=True,
            status="degraded" if degraded else "ready",
            degraded=degraded,
            database_monitor_active=bool(monitor and monitor.is_monitoring),
            dependencies=dependencies,
            checked_at=datetime.now(UTC),
        )

    def check_database_health(self) -> DependencyHealth:
        """Check the database connection, starting or stopping the monitor.

        Returns:
            DependencyHealth for the database
        """
        previous = self._cached("database", ignore_ttl=True)
        fresh = self._cached("database")
        if fresh is not None:
            return fresh

        health = self._timed_probe(self._probe_database, "Database")
        self._store("database", health)

        if self._database_monitor is not None:
            was_healthy = previous is None or previous.healthy
            if was_healthy and not health.healthy:
                logger.warning("Database connection lost, starting background monitor")
                self._database_monitor.start_monitoring()
            elif previous is not None and not previous.healthy and health.healthy:
                logger.info("Database connection recovered")
                self._database_monitor.stop_monitoring()
        return health

    def check_cache_health(self) -> DependencyHealth:
        """Check the Django cache backend (Redis in production)."""
        fresh = self._cached("cache")
        if fresh is not None:
            return fresh

        health = self._timed_probe(self._probe_cache, "Cache")
        if not health.healthy:
            logger.warning("Cache health check failed: %s", health.message)
        self._store("cache", health)
        return health

    @staticmethod
    def _probe_database() -> None:
        connection.ensure_connection()

    @staticmethod
    def _probe_cache() -> None:
        cache.set(_CACHE_PROBE_KEY, "ok", timeout=5)
        if cache.get(_CACHE_PROBE_KEY) != "ok":
            raise OperationalError("unexpected value read back from cache")

    @staticmethod
    def _timed_probe(probe: Callable[[], None], label: str) -> DependencyHealth:
        start = time.perf_counter()
        try:
            probe()
        except OperationalError as e:
            status, healthy, message = (
                HealthStatus.UNHEALTHY,
                False,
                f"{label} connection failed: {e!s}",
            )
        except Exception as e:
            status, healthy, message = (
                HealthStatus.ERROR,
                False,
                f"Unexpected error checking {label.lower()}: {e!s}",
            )
        else:
            status, healthy, message = (
                HealthStatus.HEALTHY,
                True,
                f"{label} connection successful",
            )
        return DependencyHealth(
            healthy=healthy,
            status=status,
            message=message,
            response_time_ms=(time.perf_counter() - start) * 1000,
        )

    def _cached(self, name: str, ignore_ttl: bool = False) -> DependencyHealth | None:
        entry = self._results.get(name)
        if entry is None:
            return None
        checked_at, health = entry
        if ignore_ttl or time.monotonic() - checked_at < self.cache_ttl_seconds:
            return health
        return None

    def _store(self, name: str, health: DependencyHealth) -> None:
        self._results[name] = (time.monotonic(), health)


# Global health service instance
health_service = HealthService()
