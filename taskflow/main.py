"""TaskFlow API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskFlowError → structured JSON responses
    - CORS configured from settings (not hardcoded); credentials allowed so
      browser clients can send cookies
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema is owned by alembic migrations; the app never calls create_all
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from taskflow.api.error_handlers import register_error_handlers
from taskflow.api.routes import appointments, categories, health, tasks
from taskflow.config import get_settings
from taskflow.infrastructure.database import init_db
from taskflow.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("TaskFlow API started")
    yield
    await manager.dispose()
    logger.info("TaskFlow API shutting down")


app = FastAPI(title="TaskFlow API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(categories.router)
app.include_router(tasks.router)
app.include_router(appointments.router)

register_error_handlers(app)

# Static files: the front-end build, when present.
# Mounted AFTER API routes so /api/* takes precedence.
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
