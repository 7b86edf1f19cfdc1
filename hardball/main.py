"""Hardball API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map HardballError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager opened on startup, disposed on shutdown, reachable
      only through app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Static front end mounted AFTER API routes so /api/* takes precedence
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hardball.api.error_handlers import register_error_handlers
from hardball.api.routes import auth, health, posts
from hardball.api.static_files import SPAStaticFiles
from hardball.config import get_settings
from hardball.infrastructure.database import DatabaseSessionManager
from hardball.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        ssl=settings.database_ssl,
    )
    logger.info("Hardball API started")
    try:
        yield
    finally:
        await app.state.db_manager.close()
        app.state.db_manager = None
        logger.info("Hardball API shut down")


app = FastAPI(
    title="Hardball API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(posts.router)

if os.path.isdir(settings.static_dir):
    app.mount(
        "/", SPAStaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )
