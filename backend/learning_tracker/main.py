"""Learning Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TrackerError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager created in the lifespan, stored on app.state,
      disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: cleaner startup/shutdown pairing
    - Error handlers live in api/error_handlers.py and are registered here

Run with: uvicorn learning_tracker.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learning_tracker.api.error_handlers import register_error_handlers
from learning_tracker.api.routes import health, projects, steps
from learning_tracker.config import get_settings
from learning_tracker.infrastructure.database import DatabaseSessionManager
from learning_tracker.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    app.state.db_manager = manager
    logger.info("Learning Tracker API started")
    try:
        yield
    finally:
        logger.info("Learning Tracker API shutting down")
        app.state.db_manager = None
        await manager.close()


app = FastAPI(
    title="Learning Tracker API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(projects.router)
app.include_router(steps.router)

register_error_handlers(app)
