"""Global exception handler for the shop service API.

DRF gets the first pass, so its own exceptions (and Django's ``Http404`` and
``PermissionDenied``, which DRF converts) keep DRF's ``{"detail": ...}``
body. Everything else is rendered here:

- pydantic ``ValidationError``: 400, ``error=bad_request`` plus ``errors``
- ``ResourceNotFoundError``: 404
- ``ConflictError``: 409, ``error=conflict`` plus ``detail``
- ``BusinessRuleError``: 400, ``error=bad_request``
- anything else: 500 with a generic message, details go to the log

All bodies carry ``request_id`` and ``timestamp``.
"""

import json
import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404

from pydantic import ValidationError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.constants import REQUEST_ID_HEADER
from core.exceptions.domain_exceptions import (
    BusinessRuleError,
    ConflictError,
    ResourceNotFoundError,
    ShopServiceError,
)
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Render any exception raised inside a DRF view.

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else context.get("request")
    request_id = get_request_id()

    response = exception_handler(exc, context)
    if response is None:
        status_code, body = _render_error(exc)
        body.update(request_id=request_id, timestamp=_now())
        response = Response(body, status=status_code)

    if request_id:
        response[REQUEST_ID_HEADER] = request_id

    _log_exception(exc, request, response)
    return response


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _render_error(exc: Exception) -> tuple[int, dict[str, Any]]:
    """Map a non-DRF exception onto a status code and response body."""
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST, {
            "status": status.HTTP_400_BAD_REQUEST,
            "error": "bad_request",
            "message": "Invalid request parameters",
            "errors": json.loads(exc.json(include_url=False)),
        }
    if isinstance(exc, ResourceNotFoundError):
        return status.HTTP_404_NOT_FOUND, {
            "status": status.HTTP_404_NOT_FOUND,
            "message": str(exc),
        }
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT, {
            "error": "conflict",
            "message": str(exc),
            "detail": exc.detail,
        }
    if isinstance(exc, BusinessRuleError):
        return status.HTTP_400_BAD_REQUEST, {
            "status": status.HTTP_400_BAD_REQUEST,
            "error": "bad_request",
            "message": str(exc),
        }
    # Bare ShopServiceError and anything unexpected
    return status.HTTP_500_INTERNAL_SERVER_ERROR, {
        "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "message": INTERNAL_ERROR_MESSAGE,
    }


def _client_error_status(exc: Exception) -> int | None:
    """Return the 4xx status an exception maps to, if any."""
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, Http404):
        return 404
    if isinstance(exc, PermissionDenied):
        return 403
    if isinstance(exc, APIException | ShopServiceError):
        code = getattr(exc, "status_code", 500)
        if 400 <= code < 500:
            return code
    return None


def _log_exception(exc: Exception, request: Any, response: Response) -> None:
    """Log the failure; 4xx as warnings, everything else as errors.

    Server errors always carry the stack trace. In DEBUG mode client errors
    get it too, plus a summary of the request.
    """
    is_client_error = _client_error_status(exc) is not None
    log_level = logging.WARNING if is_client_error else logging.ERROR

    method = getattr(request, "method", "unknown")
    path = getattr(request, "path", "unknown")
    parts = [
        f"{type(exc).__name__} on {method} {path} -> "
        f"{response.status_code}: {exc}"
    ]

    if settings.DEBUG or not is_client_error:
        parts.append(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        )
    if request is not None and settings.DEBUG:
        parts.append(f"Request: {_describe_request(request)}")

    logger.log(log_level, "\n".join(parts))


def _describe_request(request: Any) -> dict[str, Any]:
    user = getattr(request, "user", None)
    details: dict[str, Any] = {
        "user_id": getattr(user, "pk", None),
        "ip": request.META.get("REMOTE_ADDR", "unknown"),
    }
    if request.GET:
        details["query_params"] = request.GET.dict()
    return details
