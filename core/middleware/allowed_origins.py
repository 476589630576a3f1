"""Rejection of cross-origin requests from unlisted origins."""

import logging
from collections.abc import Callable

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse

logger = logging.getLogger(__name__)


class AllowedOriginsMiddleware:
    """Answers 403 when ``Origin`` is not in ``CORS_ALLOWED_ORIGINS``.

    django-cors-headers only omits its headers for such origins and lets the
    view run; the storefront API refuses them outright. Listed origins and
    requests without an ``Origin`` header continue to ``CorsMiddleware``,
    which must come right after this middleware.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response
        self.allowed_origins = frozenset(
            origin.rstrip("/") for origin in settings.CORS_ALLOWED_ORIGINS
        )

    def __call__(self, request: HttpRequest) -> HttpResponse:
        origin = request.headers.get("origin")
        if not origin or origin.rstrip("/") in self.allowed_origins:
            return self.get_response(request)

        logger.warning(
            "Rejected cross-origin request from %s to %s", origin, request.path
        )
        return JsonResponse(
            {
                "status": 403,
                "message": "Origin not allowed by CORS policy.",
                "request_id": getattr(request, "request_id", None),
            },
            status=403,
        )
