"""Production entry point: runs the shop API under Gunicorn.

Environment variables:
- PORT: Port to bind on 0.0.0.0 (default: 8000)
- WEB_CONCURRENCY: Worker processes (default: 4)
- GUNICORN_THREADS: Threads per worker (default: 2)
- GUNICORN_TIMEOUT: Worker timeout in seconds (default: 60)
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def build_argv() -> list[str]:
    """Assemble the Gunicorn command line from the environment."""
    return [
        "gunicorn",
        "shop_service.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("WEB_CONCURRENCY", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "60"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    """Refuse to start without the required secrets, then hand over to Gunicorn."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shop_service.settings")

    from shop_service.settings import check_required_env_vars  # noqa: PLC0415

    check_required_env_vars()
    sys.argv = build_argv()
    run()


if __name__ == "__main__":
    main()
