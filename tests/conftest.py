"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# pytest-django reads the same module from pyproject.toml; set it here too so
# that importing this file on its own is enough to configure Django.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shop_service.settings_test")
django.setup()

from django.conf import settings  # noqa: E402

from core.auth import issue_token  # noqa: E402


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def customer(db):
    """A persisted regular user."""
    from tests.factories import make_user  # noqa: PLC0415

    return make_user()


@pytest.fixture
def authenticated_client(customer):
    """Provide a client carrying a session cookie for ``customer``."""
    client = Client()
    client.cookies[settings.JWT_COOKIE_NAME] = issue_token(customer)
    return client
