"""
Rate limiting for the HTTP API.
"""

from .limiter import (
    RateLimit,
    RateLimitStatus,
    RateLimiter,
    InMemoryRateLimiter,
    RedisRateLimiter,
    WindowCounter,
    client_key,
)
from .middleware import RateLimitMiddleware

__all__ = [
    "RateLimit",
    "RateLimitStatus",
    "RateLimiter",
    "InMemoryRateLimiter",
    "RedisRateLimiter",
    "WindowCounter",
    "client_key",
    "RateLimitMiddleware",
]
