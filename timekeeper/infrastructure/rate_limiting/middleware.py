"""
HTTP side of the request limiter: rejection body and X-RateLimit headers.
"""

import re
from typing import List, Optional, Callable
from fastapi import Request, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from .limiter import RateLimiter


DEFAULT_EXCLUDE_PATHS = [r'^/$', r'.*/health$', r'^/docs', r'^/redoc', r'^/openapi\.json$']


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Counts every request except preflights and the excluded paths."""

    def __init__(
        self,
        app,
        limiter: RateLimiter,
        exclude_paths: Optional[List[str]] = None,
        key_func: Optional[Callable[[Request], str]] = None
    ):
        super().__init__(app)
        self.limiter = limiter
        self.key_func = key_func
        self.exclude_patterns = [
            re.compile(pattern) for pattern in (exclude_paths or DEFAULT_EXCLUDE_PATHS)
        ]

    async def dispatch(self, request: Request, call_next) -> Response:
        if self._is_excluded_path(request.url.path) or request.method == "OPTIONS":
            return await call_next(request)

        outcome = self.limiter.check_rate_limit(request, self.key_func)

        if not outcome.allowed:
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "error": "Too Many Requests",
                    "message": "Too many requests from this IP, please try again later",
                    "code": "RATE_LIMITED",
                    "status_code": status.HTTP_429_TOO_MANY_REQUESTS
                },
                headers=outcome.to_headers()
            )

        response = await call_next(request)

        for header_name, header_value in outcome.to_headers().items():
            response.headers[header_name] = header_value

        return response

    def _is_excluded_path(self, path: str) -> bool:
        return any(pattern.match(path) for pattern in self.exclude_patterns)
