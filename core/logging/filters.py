"""Logging filters for enriching stdlib log records."""

import logging

from core.logging.context import get_request_id


class RequestIDFilter(logging.Filter):
    """Attach the current request id to every record as ``record.request_id``.

    Records emitted outside a request (startup, management commands, the
    database monitor thread) get ``"N/A"``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "N/A"
        return True
