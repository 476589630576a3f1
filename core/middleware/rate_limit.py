"""Per-client rate limiting backed by the Django cache."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse, JsonResponse

from core.constants import DEFAULT_RATE_LIMIT_REQUESTS, DEFAULT_RATE_LIMIT_WINDOW

logger = logging.getLogger(__name__)

# Probes must keep answering even for a throttled load balancer address
EXEMPT_PATH_PREFIXES = ("/health/",)


@dataclass(frozen=True)
class RateDecision:
    """Outcome of charging one request against a client's bucket."""

    allowed: bool
    remaining: int
    retry_after: int = 0


class TokenBucket:
    """Token bucket holding ``capacity`` tokens refilled over ``window`` seconds.

    State is stored in the cache as ``(tokens, updated_at)`` so every worker
    process shares the same bucket when the cache is Redis.
    """

    def __init__(
        self, capacity: int, window: int, key_prefix: str = "rate_limit"
    ) -> None:
        """Initialize the bucket.

        Args:
            capacity: Burst size and number of requests per window
            window: Seconds needed to refill an empty bucket
            key_prefix: Cache key namespace
        """
        self.capacity = capacity
        self.window = window
        self.key_prefix = key_prefix

    def consume(self, client_key: str, now: float | None = None) -> RateDecision:
        """Take one token for ``client_key`` if one is available.

        Args:
            client_key: Identity of the client, usually its IP address
            now: Current time, for tests

        Returns:
            RateDecision describing whether the request may proceed
        """
        now = time.time() if now is None else now
        cache_key = f"{self.key_prefix}:{client_key}"

        state = cache.get(cache_key)
        if state is None:
            tokens = float(self.capacity)
        else:
            stored_tokens, updated_at = state
            refill = (now - updated_at) / self.window * self.capacity
            tokens = min(float(self.capacity), stored_tokens + refill)

        if tokens < 1:
            missing = 1 - tokens
            retry_after = max(1, int(missing / self.capacity * self.window))
            return RateDecision(allowed=False, remaining=0, retry_after=retry_after)

        tokens -= 1
        cache.set(cache_key, (tokens, now), timeout=self.window * 2)
        return RateDecision(allowed=True, remaining=int(tokens))


class RateLimitMiddleware:
    """Rejects clients that exceed ``RATE_LIMIT_REQUESTS`` per window with 429.

    Clients are identified by the first ``X-Forwarded-For`` hop or the peer
    address. When the cache is unreachable the request is let through and
    the failure is logged.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        """Initialize the middleware.

        Args:
            get_response: The next middleware or view in the chain.
        """
        self.get_response = get_response
        self.bucket = TokenBucket(
            capacity=getattr(
                settings, "RATE_LIMIT_REQUESTS", DEFAULT_RATE_LIMIT_REQUESTS
            ),
            window=getattr(settings, "RATE_LIMIT_WINDOW", DEFAULT_RATE_LIMIT_WINDOW),
        )

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if request.path.startswith(EXEMPT_PATH_PREFIXES):
            return self.get_response(request)

        client_ip = self._get_client_ip(request)
        try:
            decision = self.bucket.consume(client_ip)
        except Exception as e:
            logger.error("Rate limit check failed for %s: %s", client_ip, e)
            return self.get_response(request)

        if not decision.allowed:
            logger.warning("Rate limit exceeded for IP: %s", client_ip)
            return JsonResponse(
                {
                    "status": 429,
                    "message": "Too many requests, please try again later.",
                    "request_id": getattr(request, "request_id", None),
                    "retry_after": decision.retry_after,
                },
                status=429,
                headers={
                    "Retry-After": str(decision.retry_after),
                    "X-RateLimit-Limit": str(self.bucket.capacity),
                    "X-RateLimit-Remaining": "0",
                },
            )

        response = self.get_response(request)
        response["X-RateLimit-Limit"] = str(self.bucket.capacity)
        response["X-RateLimit-Remaining"] = str(decision.remaining)
        return response

    @staticmethod
    def _get_client_ip(request: HttpRequest) -> str:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        return str(request.META.get("REMOTE_ADDR", "unknown"))
