"""
Fixed-window request counting per client.

Counters live in Redis when a server is reachable so that several workers
share one budget; otherwise each process keeps its own.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import redis
from fastapi import Request


logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass(frozen=True)
class RateLimit:
    """At most ``requests`` per ``window`` seconds."""
    requests: int
    window: int

    def window_start(self, now: int) -> int:
        return now - now % self.window


@dataclass
class RateLimitStatus:
    """Outcome of counting one request."""
    limit: int
    remaining: int
    reset_time: int
    retry_after: Optional[int] = None

    @property
    def allowed(self) -> bool:
        return self.retry_after is None

    @classmethod
    def from_count(cls, rate_limit: RateLimit, count: int, reset_time: int, now: int) -> "RateLimitStatus":
        """``count`` includes the request being checked."""
        if count > rate_limit.requests:
            return cls(
                limit=rate_limit.requests,
                remaining=0,
                reset_time=reset_time,
                retry_after=max(1, reset_time - now),
            )
        return cls(limit=rate_limit.requests, remaining=rate_limit.requests - count, reset_time=reset_time)

    def to_headers(self) -> Dict[str, str]:
        headers = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(self.reset_time),
        }
        if not self.allowed:
            headers["Retry-After"] = str(self.retry_after)
        return headers


class WindowCounter(ABC):
    """Backend that counts requests per key in the current window."""

    @abstractmethod
    def is_allowed(self, key: str, rate_limit: RateLimit) -> RateLimitStatus:
        pass


class InMemoryRateLimiter(WindowCounter):
    """Counters held in this process. Rejected requests are not counted."""

    def __init__(self, clock: Clock = time.time):
        self.clock = clock
        self._windows: Dict[str, Tuple[int, int]] = {}

    def is_allowed(self, key: str, rate_limit: RateLimit) -> RateLimitStatus:
        now = int(self.clock())
        start = rate_limit.window_start(now)

        window, count = self._windows.get(key, (start, 0))
        if window != start:
            window, count = start, 0

        status = RateLimitStatus.from_count(rate_limit, count + 1, window + rate_limit.window, now)
        if status.allowed:
            self._windows[key] = (window, count + 1)
        return status


class RedisRateLimiter(WindowCounter):
    """Counters shared through Redis, one key per client and window."""

    def __init__(self, redis_client: redis.Redis, clock: Clock = time.time):
        self.redis = redis_client
        self.clock = clock

    def is_allowed(self, key: str, rate_limit: RateLimit) -> RateLimitStatus:
        now = int(self.clock())
        start = rate_limit.window_start(now)
        reset_time = start + rate_limit.window
        window_key = f"{key}:{start}"

        with self.redis.pipeline() as pipe:
            pipe.incr(window_key)
            pipe.expireat(window_key, reset_time)
            count, _ = pipe.execute()

        return RateLimitStatus.from_count(rate_limit, int(count), reset_time, now)


class RateLimiter:
    """Chooses a backend once and applies one limit to every request."""

    def __init__(self, rate_limit: RateLimit, redis_url: Optional[str] = None):
        self.rate_limit = rate_limit
        self.redis_client: Optional[redis.Redis] = None
        self.limiter: WindowCounter = self._select_backend(redis_url)

    def _select_backend(self, redis_url: Optional[str]) -> WindowCounter:
        if not redis_url:
            logger.info("Rate limiting with in-process counters")
            return InMemoryRateLimiter()

        client = redis.from_url(redis_url)
        try:
            client.ping()
        except redis.RedisError as e:
            logger.warning(f"Redis unavailable for rate limiting, counting in process: {e}")
            return InMemoryRateLimiter()

        self.redis_client = client
        logger.info("Rate limiting with Redis counters")
        return RedisRateLimiter(client)

    def check_rate_limit(self, request: Request,
                         key_func: Optional[Callable[[Request], str]] = None) -> RateLimitStatus:
        key = key_func(request) if key_func else client_key(request)
        return self.limiter.is_allowed(key, self.rate_limit)


def client_key(request: Request) -> str:
    """Counter key for the client address of ``request``."""
    host = request.client.host if request.client else "unknown"
    return f"rate_limit:{host}"
