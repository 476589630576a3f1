"""JWT session authentication for Django REST Framework.

Tokens are HS256 JWTs signed with ``settings.JWT_SECRET``. Browsers receive
them in an httpOnly cookie; API clients may send them as a Bearer token.
"""

from datetime import UTC, datetime, timedelta

from django.conf import settings
from django.http import HttpResponse

import jwt
import structlog
from rest_framework import authentication

from core.models import User

logger = structlog.get_logger(__name__)

ACCESS_TOKEN_TYPE = "access_token"


def issue_token(user: User) -> str:
    """Sign a session token for a user.

    Args:
        user: The user the token identifies.

    Returns:
        Encoded JWT carrying ``userId``, ``type``, ``iat`` and ``exp`` claims.
    """
    now = datetime.now(UTC)
    payload = {
        "userId": user.pk,
        "type": ACCESS_TOKEN_TYPE,
        "iat": now,
        "exp": now + timedelta(days=settings.JWT_EXPIRATION_DAYS),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def set_token_cookie(response: HttpResponse, token: str) -> None:
    """Attach a session token to ``response`` as an httpOnly cookie."""
    response.set_cookie(
        settings.JWT_COOKIE_NAME,
        token,
        max_age=settings.JWT_EXPIRATION_DAYS * 24 * 60 * 60,
        httponly=True,
        secure=settings.JWT_COOKIE_SECURE,
        samesite="Strict",
    )


def clear_token_cookie(response: HttpResponse) -> None:
    """Expire the session cookie on the client."""
    response.set_cookie(
        settings.JWT_COOKIE_NAME,
        "",
        max_age=0,
        httponly=True,
        secure=settings.JWT_COOKIE_SECURE,
        samesite="Strict",
    )


class JWTAuthentication(authentication.BaseAuthentication):
    """Cookie or Bearer token authentication.

    The ``jwt`` cookie takes precedence over the Authorization header.
    A missing, malformed, expired or otherwise invalid token leaves the
    request anonymous: public endpoints keep working with a stale cookie,
    while protected endpoints answer 401 through their permission classes.
    """

    def authenticate(self, request):
        """Authenticate the request using the session token.

        Args:
            request: Django request object

        Returns:
            Tuple of (user, token), or None when no valid token was supplied
        """
        token = self._extract_token(request)
        if not token:
            return None

        payload = self._decode(token)
        if payload is None:
            return None

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            logger.warning("Ignoring token with unexpected type")
            return None

        user = User.objects.filter(pk=payload.get("userId")).first()
        if user is None:
            logger.warning(
                "Token refers to unknown user", user_id=payload.get("userId")
            )
            return None

        return (user, token)

    def _extract_token(self, request) -> str | None:
        token = request.COOKIES.get(settings.JWT_COOKIE_NAME)
        if token:
            return token

        auth_header = request.headers.get("authorization", "")
        parts = auth_header.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
        if auth_header:
            logger.warning("Ignoring malformed authorization header")
        return None

    def _decode(self, token: str) -> dict | None:
        try:
            return jwt.decode(
                token,
                settings.JWT_SECRET,
                algorithms=[settings.JWT_ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("JWT token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning("Invalid JWT token", error=str(e))
        return None

    def authenticate_header(self, _request):
        """Return WWW-Authenticate header value for 401 responses.

        Args:
            _request: Django request object (unused)

        Returns:
            Authentication header value
        """
        return "Bearer"
