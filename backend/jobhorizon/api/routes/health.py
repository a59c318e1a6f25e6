"""Health & Readiness Probes — liveness text plus JSON liveness/readiness endpoints.

Invariants:
    - GET / always returns the plain-text liveness line if the process is up
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from jobhorizon.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

SERVICE_NAME = "jobhorizon-api"
SERVICE_VERSION = "1.0.0"


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Your Server is Running"


@router.get("/health/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
