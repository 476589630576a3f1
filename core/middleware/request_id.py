"""Request ID middleware for log correlation."""

import re
import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import REQUEST_ID_HEADER
from core.logging.context import clear_request_id, set_request_id

# Accept caller-supplied ids only if they are short and header-safe
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")


class RequestIDMiddleware:
    """Assigns every request an id and echoes it in ``X-Request-ID``.

    An incoming ``X-Request-ID`` is reused when it looks sane, otherwise a
    UUID4 is generated. The id is exposed as ``request.request_id`` and in
    thread-local storage, where the log processors and the exception
    handler pick it up. Nothing else is kept per thread.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = self._resolve_request_id(request)
        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)

        try:
            response = self.get_response(request)
            response[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            clear_request_id()

    @staticmethod
    def _resolve_request_id(request: HttpRequest) -> str:
        supplied = request.headers.get(REQUEST_ID_HEADER, "")
        if _VALID_REQUEST_ID.match(supplied):
            return supplied
        return str(uuid.uuid4())
