"""Database setup for SQLAlchemy sessions and engine."""
from __future__ import annotations

import logging
import ssl
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import Settings

LOGGER = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # noqa: ARG001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings) -> Engine:
    """Create the engine with a bounded pool (TLS for remote databases)."""
    if settings.uses_sqlite():
        engine = create_engine(
            settings.DB_CREDS,
            connect_args={"check_same_thread": False},
            future=True,
        )
        # SQLite ignores ON DELETE CASCADE unless asked per connection
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    tls_context = ssl.create_default_context(cadata=settings.CERTIFICATE)
    return create_engine(
        settings.DB_CREDS,
        connect_args={"ssl": tls_context},
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_recycle=settings.DB_POOL_RECYCLE_SECONDS,
        pool_pre_ping=True,
        future=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, future=True)


def init_db(engine: Engine) -> None:
    """Create the users and events tables if they do not exist yet."""
    from reminder.models import event as _event, user as _user  # noqa: F401 - ensure models are registered

    Base.metadata.create_all(bind=engine)
    LOGGER.info("Schema ready: %s", ", ".join(sorted(Base.metadata.tables)))


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
