"""Catalog listing and upload constants."""

# Product listings
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
TOP_PRODUCTS_LIMIT = 5
NEW_PRODUCTS_LIMIT = 5
SORTED_PRODUCTS_LIMIT = 10

# Reviews
MIN_RATING = 1
MAX_RATING = 5

# Image uploads
ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp"})
ALLOWED_IMAGE_MIME_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})
UPLOAD_FIELD_NAME = "image"
