"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every
routed endpoint. Protects against denial-of-service and resource abuse.
Rejections raise RateLimitExceeded, answered by the error registry
(RATE_LIMITED).

The limit is applied as a router-level dependency, so it is checked
after routing, once per request, with one bucket per client and path.
"""

from typing import Awaitable, Callable

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Create the application limiter from settings.

    Args:
        settings: Application settings.

    Returns:
        A slowapi Limiter keyed on the client address.
    """
    return Limiter(
        key_func=get_remote_address,
        enabled=settings.rate_limit_enabled,
    )


def build_rate_limit_dependency(
    limiter: Limiter, limit_value: str
) -> Callable[[Request], Awaitable[None]]:
    """Return a FastAPI dependency enforcing ``limit_value``.

    Args:
        limiter: The application limiter. A disabled limiter never rejects.
        limit_value: slowapi limit string, e.g. ``"120/minute"``.

    Returns:
        An async dependency taking the request; raises RateLimitExceeded
        once the client exceeds the limit on the requested path.
    """

    async def enforce_rate_limit(request: Request) -> None:
        return None

    return limiter.limit(limit_value)(enforce_rate_limit)
