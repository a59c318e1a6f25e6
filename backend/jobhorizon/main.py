"""JobHorizon API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map JobHorizonError → structured JSON responses
    - CORS configured from settings, with credentials allowed for the token cookie
    - Every request is access-logged (method, path, status, duration)
    - Database engine created and tables ensured on startup, disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobhorizon.api.error_handlers import register_error_handlers
from jobhorizon.infrastructure.database import init_db, close_db
from jobhorizon.infrastructure.observability import log_requests, setup_logging
from jobhorizon.config import get_settings
from jobhorizon.api.routes import applications, auth, health, jobs

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
    await manager.create_all()
    logger.info(f"JobHorizon API started ({settings.environment})")
    yield
    await close_db()
    logger.info("JobHorizon API shutting down")


app = FastAPI(
    title="JobHorizon API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

app.middleware("http")(log_requests)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(jobs.router)
app.include_router(applications.router)

register_error_handlers(app)
