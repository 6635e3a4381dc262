"""Rate limiting (slowapi over `limits`).

One application-wide fixed window per client address: every API route counts
against the same budget (100 requests per 15 minutes by default). The key is
the socket peer address; proxy headers such as X-Forwarded-For are ignored,
so rotating them does not open a new window.

Storage:
- memory:// - per-process, expired windows are evicted by `limits`
- redis://  - shared by all workers; if Redis is unreachable the limiter
  falls back to in-memory counting instead of failing the request

The limiter lives on `app.state.limiter`, where SlowAPIMiddleware looks it up.
"""

import logging

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.settings import Settings

logger = logging.getLogger("uvicorn.error")


def rate_limit_value(settings: Settings) -> str:
    """`limits` notation for the configured window, e.g. "100/900 seconds"."""
    return f"{settings.rate_limit_max_requests}/{settings.rate_limit_window_seconds} seconds"


def storage_uri(settings: Settings) -> str:
    if settings.rate_limit_backend == "redis":
        return settings.redis_url
    return "memory://"


def build_limiter(settings: Settings) -> Limiter:
    """Limiter configured from settings (memory or Redis storage)."""
    uri = storage_uri(settings)
    logger.info(f"Rate limit {rate_limit_value(settings)} per client ({uri.split(':', 1)[0]})")
    return Limiter(
        key_func=get_remote_address,
        application_limits=[rate_limit_value(settings)],
        storage_uri=uri,
        strategy="fixed-window",
        headers_enabled=True,
        in_memory_fallback_enabled=settings.rate_limit_backend == "redis",
        swallow_errors=True,
    )
