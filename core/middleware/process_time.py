"""Response timing middleware."""

import logging
import time
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import PROCESS_TIME_HEADER, SLOW_REQUEST_THRESHOLD

logger = logging.getLogger(__name__)


class ProcessTimeMiddleware:
    """Stamps each response with the time spent producing it.

    The duration in seconds goes into the ``X-Process-Time`` header. Requests
    slower than ``SLOW_REQUEST_THRESHOLD`` are logged as warnings with the
    route and status, which is usually enough to spot an unindexed catalog
    query or an oversized order listing.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        started = time.perf_counter()
        response = self.get_response(request)
        elapsed = time.perf_counter() - started

        response[PROCESS_TIME_HEADER] = f"{elapsed:.6f}"

        if elapsed > SLOW_REQUEST_THRESHOLD:
            logger.warning(
                "Slow request: %s %s -> %s in %.2fs (threshold %.1fs)",
                request.method,
                request.path,
                response.status_code,
                elapsed,
                SLOW_REQUEST_THRESHOLD,
            )

        return response
