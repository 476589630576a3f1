#!/usr/bin/env python
"""Script to run the Django development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Check required settings, then run ``runserver`` on PORT (default 8000)."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shop_service.settings")

    from shop_service.settings import check_required_env_vars  # noqa: PLC0415

    check_required_env_vars()
    port = os.getenv("PORT", "8000")
    execute_from_command_line([sys.argv[0], "runserver", f"0.0.0.0:{port}"])


if __name__ == "__main__":
    main()
