"""Unit tests for the process time middleware."""

import unittest
from unittest.mock import patch

from django.http import HttpResponse
from django.test import RequestFactory

from core.middleware import ProcessTimeMiddleware


class TestProcessTimeMiddleware(unittest.TestCase):
    """Test cases for ProcessTimeMiddleware."""

    def setUp(self):
        """Set up the middleware around a trivial view."""
        self.factory = RequestFactory()
        self.middleware = ProcessTimeMiddleware(lambda request: HttpResponse())

    def test_sets_header(self):
        """Test that the elapsed time is reported in seconds."""
        response = self.middleware(self.factory.get("/"))

        self.assertGreaterEqual(float(response["X-Process-Time"]), 0)

    @patch("core.middleware.process_time.logger")
    @patch("core.middleware.process_time.time.perf_counter", side_effect=[0.0, 2.5])
    def test_logs_slow_requests(self, mock_counter, mock_logger):
        """Test that requests over the threshold are logged."""
        response = self.middleware(self.factory.get("/api/orders"))

        self.assertEqual(response["X-Process-Time"], "2.500000")
        mock_logger.warning.assert_called_once()
        self.assertIn("/api/orders", mock_logger.warning.call_args[0])

    @patch("core.middleware.process_time.logger")
    @patch("core.middleware.process_time.time.perf_counter", side_effect=[0.0, 0.1])
    def test_fast_requests_are_not_logged(self, mock_counter, mock_logger):
        """Test that normal requests stay quiet."""
        self.middleware(self.factory.get("/"))

        mock_logger.warning.assert_not_called()


if __name__ == "__main__":
    unittest.main()
