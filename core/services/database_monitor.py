"""Background reconnect loop used while the database is unreachable."""

import logging
import threading

from django.db import connection
from django.db.utils import OperationalError

logger = logging.getLogger(__name__)


class DatabaseMonitor:
    """Polls the database on a daemon thread until it answers again.

    The loop only exists during an outage: the health service starts it on
    the first failed probe and it exits by itself once a connection succeeds.
    Polling backs off exponentially after ``backoff_after`` failures.
    """

    def __init__(
        self,
        base_interval_seconds: int = 30,
        backoff_after: int = 3,
        max_interval_seconds: int = 300,
    ) -> None:
        """Initialize the monitor.

        Args:
            base_interval_seconds: Wait between polls before backoff starts
            backoff_after: Failures tolerated at the base interval
            max_interval_seconds: Upper bound for the backed-off interval
        """
        self.base_interval_seconds = base_interval_seconds
        self.backoff_after = backoff_after
        self.max_interval_seconds = max_interval_seconds
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._failures = 0

    @property
    def is_monitoring(self) -> bool:
        """Whether the reconnect loop is currently running."""
        thread = self._thread
        return thread is not None and thread.is_alive()

    @property
    def consecutive_failures(self) -> int:
        """Failed polls since the loop started."""
        return self._failures

    def start_monitoring(self) -> None:
        """Start the reconnect loop unless it is already running."""
        with self._lock:
            if self.is_monitoring:
                return
            self._failures = 0
            self._stop_event.clear()
            self._thread = threading.Thread(
                target=self._run, name="DatabaseMonitor", daemon=True
            )
            self._thread.start()
        logger.info("Database monitor started")

    def stop_monitoring(self) -> None:
        """Ask the loop to exit and wait briefly for it."""
        with self._lock:
            thread = self._thread
            self._stop_event.set()
            self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=5.0)
            logger.info("Database monitor stopped")

    def next_interval(self) -> int:
        """Seconds to wait after the current number of failures."""
        excess = self._failures - self.backoff_after
        if excess <= 0:
            return self.base_interval_seconds
        return min(self.base_interval_seconds * 2**excess, self.max_interval_seconds)

    def _run(self) -> None:
        while not self._stop_event.is_set():
            if self._database_answers():
                logger.info(
                    "Database reachable again after %d failed polls", self._failures
                )
                return
            self._failures += 1
            if self._failures % 10 == 0:
                logger.warning(
                    "Database still unavailable after %d polls", self._failures
                )
            self._stop_event.wait(timeout=self.next_interval())

    @staticmethod
    def _database_answers() -> bool:
        try:
            connection.ensure_connection()
        except OperationalError:
            return False
        except Exception:
            logger.exception("Unexpected error while polling the database")
            return False
        finally:
            # The poll runs on its own thread; do not leak its connection
            connection.close()
        return True


# Global database monitor instance
database_monitor = DatabaseMonitor()
