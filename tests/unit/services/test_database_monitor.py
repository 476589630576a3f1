"""Unit tests for the database reconnect monitor."""

import unittest
from unittest.mock import patch

from django.db.utils import OperationalError

from core.services.database_monitor import DatabaseMonitor


class TestDatabaseMonitor(unittest.TestCase):
    """Test cases for DatabaseMonitor."""

    def setUp(self):
        """Set up a monitor with short intervals."""
        self.monitor = DatabaseMonitor(
            base_interval_seconds=1, backoff_after=3, max_interval_seconds=8
        )

    def tearDown(self):
        """Make sure no polling thread outlives the test."""
        self.monitor.stop_monitoring()

    def test_not_monitoring_initially(self):
        """Test that the loop only runs once started."""
        self.assertFalse(self.monitor.is_monitoring)
        self.assertEqual(self.monitor.consecutive_failures, 0)

    def test_interval_before_backoff(self):
        """Test that the base interval is used for the first failures."""
        self.monitor._failures = 3
        self.assertEqual(self.monitor.next_interval(), 1)

    def test_interval_backs_off_exponentially(self):
        """Test that the interval doubles per failure past the threshold."""
        self.monitor._failures = 4
        self.assertEqual(self.monitor.next_interval(), 2)
        self.monitor._failures = 5
        self.assertEqual(self.monitor.next_interval(), 4)

    def test_interval_is_capped(self):
        """Test that the backed-off interval never exceeds the maximum."""
        self.monitor._failures = 30
        self.assertEqual(self.monitor.next_interval(), 8)

    @patch.object(DatabaseMonitor, "_database_answers", return_value=True)
    def test_loop_exits_when_database_answers(self, mock_answers):
        """Test that the thread stops by itself after a successful poll."""
        self.monitor.start_monitoring()
        self.monitor._thread.join(timeout=5)

        self.assertFalse(self.monitor.is_monitoring)
        self.assertEqual(self.monitor.consecutive_failures, 0)
        mock_answers.assert_called_once()

    @patch.object(DatabaseMonitor, "_database_answers", return_value=False)
    def test_start_is_idempotent_while_running(self, mock_answers):
        """Test that a second start does not spawn another thread."""
        self.monitor.start_monitoring()
        first = self.monitor._thread

        self.monitor.start_monitoring()

        self.assertIs(self.monitor._thread, first)
        self.assertTrue(self.monitor.is_monitoring)

    @patch.object(DatabaseMonitor, "_database_answers", return_value=False)
    def test_stop_ends_the_loop(self, mock_answers):
        """Test that stop_monitoring terminates a failing loop."""
        self.monitor.start_monitoring()
        thread = self.monitor._thread

        self.monitor.stop_monitoring()

        self.assertFalse(thread.is_alive())
        self.assertFalse(self.monitor.is_monitoring)

    @patch("core.services.database_monitor.connection")
    def test_database_answers_handles_operational_error(self, mock_connection):
        """Test that a refused connection counts as not answering."""
        mock_connection.ensure_connection.side_effect = OperationalError("down")

        self.assertFalse(DatabaseMonitor._database_answers())
        mock_connection.close.assert_called_once()

    @patch("core.services.database_monitor.connection")
    def test_database_answers_closes_connection(self, mock_connection):
        """Test that a successful poll releases its connection."""
        self.assertTrue(DatabaseMonitor._database_answers())
        mock_connection.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
