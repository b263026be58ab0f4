"""
Database configuration and session management.
"""

import logging
from typing import Generator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from timekeeper.config import Settings, get_settings
from timekeeper.infrastructure.db.models import Base


logger = logging.getLogger(__name__)


class Database:
    """
    Owns the engine and the session factory for one application instance.
    Stale pooled connections are detected on checkout and replaced.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: Engine = create_engine(url, echo=echo, **self._engine_options(url))
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Database":
        settings = settings or get_settings()
        return cls(settings.database_url, echo=settings.database_echo)

    @staticmethod
    def _engine_options(url: str) -> dict:
        if url.startswith("sqlite"):
            options = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
                # A single shared connection keeps the in-memory database alive
                options["poolclass"] = StaticPool
            return options
        return {"pool_pre_ping": True}

    def create_tables(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables ensured")

    def drop_tables(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connections closed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency function to get database session.
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    finally:
        db.close()
