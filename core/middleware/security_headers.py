"""Security response headers."""

from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from core.constants import SECURITY_HEADERS

# Headers that only advertise the server stack
_DISCLOSURE_HEADERS = ("X-Powered-By", "Server")


class SecurityHeadersMiddleware:
    """Adds the ``SECURITY_HEADERS`` set to every response.

    Values already set by a view win, so an endpoint can relax a single
    header (for example the resource policy on served uploads) without
    touching this middleware. Server disclosure headers are stripped.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        response = self.get_response(request)

        for header, value in SECURITY_HEADERS.items():
            if not response.has_header(header):
                response[header] = value

        for header in _DISCLOSURE_HEADERS:
            if response.has_header(header):
                del response[header]

        return response
