"""Per-thread request id used to correlate log lines.

This is the only per-request state kept outside the request object; the
authenticated user is always passed explicitly.
"""

import threading

_local = threading.local()


def set_request_id(request_id: str) -> None:
    """Bind ``request_id`` to the current thread."""
    _local.request_id = request_id


def get_request_id() -> str | None:
    """Return the request id bound to the current thread, if any."""
    return getattr(_local, "request_id", None)


def clear_request_id() -> None:
    """Unbind the request id once the response has been produced."""
    _local.__dict__.pop("request_id", None)
