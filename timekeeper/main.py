"""
Application factory for the timekeeper HTTP API.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from typing import Dict, Any, Optional

from timekeeper.config import Settings, get_settings
from timekeeper.infrastructure.auth import JWTHandler, PasswordHasher
from timekeeper.infrastructure.db.database import Database
from timekeeper.infrastructure.events.event_setup import initialize_event_system
from timekeeper.infrastructure.notifications.telegram import TelegramNotifier
from timekeeper.infrastructure.rate_limiting import RateLimit, RateLimiter, RateLimitMiddleware
from timekeeper.infrastructure.reports import PDFReportService, ExcelReportService
from timekeeper.infrastructure.web.middleware import ErrorHandlerMiddleware, register_exception_handlers
from timekeeper.infrastructure.web.routers import auth, time_entries, users


logger = logging.getLogger(__name__)

ROUTERS = (
    (auth.router, "/auth", "Authentication"),
    (time_entries.router, "/time", "Time Tracking"),
    (users.router, "/users", "Users"),
)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    logger.info(f"{settings.api_title} {settings.api_version} starting ({settings.environment})")

    if settings.auto_create_tables:
        app.state.database.create_tables()

    if not app.state.notifier.is_configured:
        logger.warning("Telegram notifications disabled: bot token or chat ID missing")

    yield

    logger.info("Stopping, releasing database connections")
    app.state.database.dispose()


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    notifier=None
) -> FastAPI:
    """
    Build an app instance. Tests inject their own database and notifier;
    everything else is derived from ``settings``.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.database = database or Database.from_settings(settings)
    app.state.notifier = notifier or TelegramNotifier.from_settings(settings)
    app.state.event_dispatcher = initialize_event_system(app.state.notifier)
    app.state.jwt_handler = JWTHandler(settings)
    app.state.password_hasher = PasswordHasher()
    app.state.pdf_service = PDFReportService(settings)
    app.state.excel_service = ExcelReportService()

    register_exception_handlers(app)

    # added first so it runs innermost, after error handling and CORS
    if settings.rate_limit_enabled and not settings.is_testing:
        limiter = RateLimiter(
            RateLimit(requests=settings.rate_limit_requests, window=settings.rate_limit_period),
            redis_url=settings.redis_url
        )
        app.add_middleware(RateLimitMiddleware, limiter=limiter)

    app.add_middleware(ErrorHandlerMiddleware, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    for router, path, tag in ROUTERS:
        app.include_router(router, prefix=f"{settings.api_prefix}{path}", tags=[tag])

    @app.get("/")
    async def root() -> Dict[str, Any]:
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": "/docs",
            "health": f"{settings.api_prefix}/health"
        }

    @app.get(f"{settings.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version
        }

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "timekeeper.main:create_application",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )
