"""Database configuration and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from nutritrack.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def create_db_engine(settings: Settings) -> Engine:
    """Create the pooled engine shared by request handlers and background jobs."""

    connect_args: dict[str, object] = {}
    if settings.database_url.startswith("sqlite"):
        # Scheduler scans run in worker threads and share the pool.
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.database_url, pool_pre_ping=True, connect_args=connect_args
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database(engine: Engine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from nutritrack.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database schema ready")


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "get_db",
    "initialize_database",
]
