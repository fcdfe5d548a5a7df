"""FastAPI application factory wiring routes, services, and shared state."""
from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request

from reminder.api import routes_auth, routes_event, routes_health
from reminder.core.config import Settings, get_settings
from reminder.core.db import build_engine, build_session_factory, init_db
from reminder.core.errors import register_exception_handlers
from reminder.core.security import TokenCodec
from reminder.repositories.event_repository import EventRepository
from reminder.repositories.user_repository import UserRepository
from reminder.services.auth_service import AuthService
from reminder.services.event_service import EventService
from reminder.services.identity_service import IdentityResolver

VERSION = "1.0.0"

LOGGER = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    engine = build_engine(settings)
    init_db(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        LOGGER.info("Reminder API %s ready", VERSION)
        yield
        LOGGER.info("Received shutdown signal, releasing database pool...")
        engine.dispose()
        LOGGER.info("Server shutdown successfully")

    app = FastAPI(title="Reminder API", version=VERSION, lifespan=lifespan)

    # Initialize persistence and services
    token_codec = TokenCodec(
        settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        lifetime=timedelta(days=settings.JWT_TOKEN_EXPIRE_DAYS),
    )
    user_repo = UserRepository()
    event_repo = EventRepository()

    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.token_codec = token_codec
    app.state.auth_service = AuthService(user_repo, token_codec)
    app.state.identity_resolver = IdentityResolver(user_repo)
    app.state.event_service = EventService(event_repo)

    register_exception_handlers(app)

    app.include_router(routes_auth.router)
    app.include_router(routes_event.router)
    app.include_router(routes_health.router)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logging.info("📥 %s %s START", request.method, request.url.path)
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        logging.info("🚀 %s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed)
        return response

    return app
