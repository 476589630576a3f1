"""Constants package for core application."""

from core.constants.catalog import (
    ALLOWED_IMAGE_EXTENSIONS,
    ALLOWED_IMAGE_MIME_TYPES,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    MAX_RATING,
    MIN_RATING,
    NEW_PRODUCTS_LIMIT,
    SORTED_PRODUCTS_LIMIT,
    TOP_PRODUCTS_LIMIT,
    UPLOAD_FIELD_NAME,
)
from core.constants.http import (
    DEFAULT_RATE_LIMIT_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW,
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SECURITY_HEADERS,
    SLOW_REQUEST_THRESHOLD,
)
from core.constants.pricing import (
    FREE_SHIPPING_THRESHOLD,
    MONEY_QUANTUM,
    SHIPPING_FEE,
    TAX_RATE,
)

__all__ = [
    "ALLOWED_IMAGE_EXTENSIONS",
    "ALLOWED_IMAGE_MIME_TYPES",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_RATE_LIMIT_REQUESTS",
    "DEFAULT_RATE_LIMIT_WINDOW",
    "FREE_SHIPPING_THRESHOLD",
    "MAX_PAGE_SIZE",
    "MAX_RATING",
    "MIN_RATING",
    "MONEY_QUANTUM",
    "NEW_PRODUCTS_LIMIT",
    "PROCESS_TIME_HEADER",
    "REQUEST_ID_HEADER",
    "SECURITY_HEADERS",
    "SHIPPING_FEE",
    "SLOW_REQUEST_THRESHOLD",
    "SORTED_PRODUCTS_LIMIT",
    "TAX_RATE",
    "TOP_PRODUCTS_LIMIT",
    "UPLOAD_FIELD_NAME",
]
