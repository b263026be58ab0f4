"""
One JSON error shape for every failure: domain errors, framework HTTP
errors and anything unhandled.
"""

import logging
import traceback
from http import HTTPStatus
from typing import Any, Dict
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import FastAPI, status

from timekeeper.domain.models.base import (
    DomainException,
    ValidationError,
    OverlapConflictError,
    EntityNotFoundError,
    DuplicateEntityError,
    AuthenticationError,
    ForbiddenError,
)

logger = logging.getLogger(__name__)


# Most specific first; the first isinstance match wins
DOMAIN_STATUS_CODES = [
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "Unauthorized"),
    (ForbiddenError, status.HTTP_403_FORBIDDEN, "Forbidden"),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, "Not Found"),
    (DuplicateEntityError, status.HTTP_409_CONFLICT, "Conflict"),
    (OverlapConflictError, status.HTTP_409_CONFLICT, "Conflict"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
]


def error_body(error: str, message: str, code: str, status_code: int) -> Dict[str, Any]:
    return {
        "error": error,
        "message": message,
        "code": code,
        "status_code": status_code
    }


def domain_exception_status(exc: DomainException):
    for exc_type, status_code, error in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code, error
    return status.HTTP_400_BAD_REQUEST, "Bad Request"


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Render a domain exception as a JSON error body."""
    status_code, error = domain_exception_status(exc)
    content = error_body(error, exc.message, exc.code, status_code)

    if isinstance(exc, ValidationError) and exc.field:
        content["field"] = exc.field

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
        logger.info(f"Rejected request to {request.url.path}: {exc.code}")

    return JSONResponse(status_code=status_code, content=content, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework HTTP errors (unknown path, wrong method) in the same shape."""
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        message = f"The path {request.url.path} was not found"
    else:
        message = str(exc.detail)
    content = error_body(
        error=_reason_phrase(exc.status_code),
        message=message,
        code=f"HTTP_{exc.status_code}",
        status_code=exc.status_code
    )
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Turns an exception escaping the route into a 500 with the common body."""

    def __init__(self, app, debug: bool = False):
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                f"{request.method} {request.url.path} failed",
                extra={"client_host": request.client.host if request.client else None}
            )
            content = error_body(
                "Internal Server Error",
                "An unexpected error occurred",
                "INTERNAL_ERROR",
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )
            if self.debug:
                content["debug"] = {
                    "exception_type": type(exc).__name__,
                    "detail": str(exc),
                    "traceback": traceback.format_exception(type(exc), exc, exc.__traceback__)
                }
            return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)
