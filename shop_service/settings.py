"""Django settings for the shop service.

All deployment-specific values are read from environment variables so the
same image can run locally, in CI and in production.
"""

import os
import sys
from pathlib import Path

from corsheaders.defaults import default_headers

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str = "") -> list[str]:
    """Read a comma separated list from the environment."""
    items = os.getenv(name, default).split(",")
    return [item.strip() for item in items if item.strip()]


SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-shop-service-dev-key")
DEBUG = _env_bool("DEBUG", default=False)
ALLOWED_HOSTS = _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1")

# Service metadata
SERVICE_NAME = os.getenv("SERVICE_NAME", "shop-service")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "corsheaders",
    "rest_framework",
    "core.apps.CoreConfig",
]

MIDDLEWARE = [
    "core.middleware.RequestIDMiddleware",
    "core.middleware.ProcessTimeMiddleware",
    "core.middleware.AllowedOriginsMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "core.middleware.SecurityHeadersMiddleware",
    "django.middleware.common.CommonMiddleware",
    "core.middleware.RateLimitMiddleware",
]

ROOT_URLCONF = "shop_service.urls"
WSGI_APPLICATION = "shop_service.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

# Database
DATABASES = {
    "default": {
        "ENGINE": os.getenv("DB_ENGINE", "django.db.backends.postgresql"),
        "NAME": os.getenv("DB_NAME", "shop"),
        "USER": os.getenv("DB_USER", "shop"),
        "PASSWORD": os.getenv("DB_PASSWORD", ""),
        "HOST": os.getenv("DB_HOST", "localhost"),
        "PORT": os.getenv("DB_PORT", "5432"),
        "CONN_MAX_AGE": int(os.getenv("DB_CONN_MAX_AGE", "60")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Cache (rate limiting and health checks)
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": os.getenv("REDIS_URL", "redis://localhost:6379/0"),
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.PBKDF2PasswordHasher",
    "django.contrib.auth.hashers.PBKDF2SHA1PasswordHasher",
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Uploaded product images
MEDIA_URL = "/uploads/"
MEDIA_ROOT = Path(os.getenv("MEDIA_ROOT", str(BASE_DIR / "uploads")))
FILE_UPLOAD_MAX_MEMORY_SIZE = 5 * 1024 * 1024

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": ["core.auth.jwt_auth.JWTAuthentication"],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "EXCEPTION_HANDLER": "core.exceptions.custom_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

# JWT session tokens
JWT_SECRET = os.getenv("JWT_SECRET", "")
JWT_ALGORITHM = "HS256"
JWT_EXPIRATION_DAYS = int(os.getenv("JWT_EXPIRATION_DAYS", "30"))
JWT_COOKIE_NAME = "jwt"
JWT_COOKIE_SECURE = _env_bool("JWT_COOKIE_SECURE", default=not DEBUG)

# CORS (django-cors-headers). Unknown origins are rejected by
# core.middleware.AllowedOriginsMiddleware before the library runs.
ALLOWED_ORIGINS = _env_list("ALLOWED_ORIGINS", "http://localhost:5173")
CORS_ALLOWED_ORIGINS = [origin.rstrip("/") for origin in ALLOWED_ORIGINS]
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_HEADERS = (*default_headers, "x-request-id")
CORS_EXPOSE_HEADERS = ["X-Request-ID"]
CORS_PREFLIGHT_MAX_AGE = 86400

# Rate limiting (token bucket per client IP)
RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", "500"))
RATE_LIMIT_WINDOW = int(os.getenv("RATE_LIMIT_WINDOW", str(15 * 60)))

# Payment provider
PAYPAL_CLIENT_ID = os.getenv("PAYPAL_CLIENT_ID", "")

REQUIRED_ENV_VARS = ["JWT_SECRET", "PAYPAL_CLIENT_ID"]

TEST_MODE = False

# Logging is configured by core.logging.setup_logging() once the app is ready
LOGGING_CONFIG = None


def check_required_env_vars() -> None:
    """Abort startup when a required environment variable is missing."""
    missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
    if missing:
        sys.stderr.write(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Check your environment or .env file.\n"
        )
        sys.exit(1)
