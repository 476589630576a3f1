"""Unit tests for the Gunicorn entry point."""

import os
import sys
import unittest
from unittest.mock import patch

import start_server


class TestBuildArgv(unittest.TestCase):
    """Test cases for build_argv."""

    def test_defaults(self):
        """Test the command line without overrides."""
        with patch.dict(os.environ, {}, clear=True):
            argv = start_server.build_argv()

        self.assertEqual(argv[1], "shop_service.wsgi:application")
        self.assertEqual(argv[argv.index("--bind") + 1], "0.0.0.0:8000")
        self.assertEqual(argv[argv.index("--workers") + 1], "4")

    def test_environment_overrides(self):
        """Test that PORT and worker settings are honored."""
        env = {"PORT": "9000", "WEB_CONCURRENCY": "8", "GUNICORN_TIMEOUT": "30"}
        with patch.dict(os.environ, env, clear=True):
            argv = start_server.build_argv()

        self.assertEqual(argv[argv.index("--bind") + 1], "0.0.0.0:9000")
        self.assertEqual(argv[argv.index("--workers") + 1], "8")
        self.assertEqual(argv[argv.index("--timeout") + 1], "30")


class TestMain(unittest.TestCase):
    """Test cases for main."""

    @patch("start_server.run")
    @patch("shop_service.settings.check_required_env_vars")
    def test_checks_env_then_runs(self, mock_check, mock_run):
        """Test that the secrets are checked before Gunicorn starts."""
        with patch("sys.argv", ["start_server.py"]):
            start_server.main()

            self.assertEqual(sys.argv[0], "gunicorn")

        mock_check.assert_called_once()
        mock_run.assert_called_once()

    @patch("start_server.run")
    @patch(
        "shop_service.settings.check_required_env_vars", side_effect=SystemExit(1)
    )
    def test_missing_env_aborts(self, mock_check, mock_run):
        """Test that Gunicorn never starts without the secrets."""
        with patch("sys.argv", ["start_server.py"]), self.assertRaises(SystemExit):
            start_server.main()

        mock_run.assert_not_called()


if __name__ == "__main__":
    unittest.main()
