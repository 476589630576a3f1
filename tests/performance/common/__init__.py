"""Common utilities for performance tests."""

import os

from locust import HttpUser, between


class BasePerformanceUser(HttpUser):
    """Base class for performance test users.

    Logs in with ``PERF_USER_EMAIL`` / ``PERF_USER_PASSWORD`` when both are
    set; the ``jwt`` cookie is then kept by the client session. Without
    credentials the user browses anonymously.
    """

    abstract = True
    wait_time = between(1, 3)
    logged_in = False

    def on_start(self):
        """Called when user starts."""
        self.logged_in = self._login()

    def _login(self) -> bool:
        email = os.getenv("PERF_USER_EMAIL")
        password = os.getenv("PERF_USER_PASSWORD")
        if not (email and password):
            return False

        response = self.client.post(
            "/api/users/auth",
            json={"email": email, "password": password},
            name="/api/users/auth",
        )
        return response.status_code == 200
