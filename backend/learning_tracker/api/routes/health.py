"""Health & Readiness Checks — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if database is unreachable or not initialized
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from learning_tracker.api.dependencies import get_db_manager
from learning_tracker.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "learning-tracker-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    manager: DatabaseSessionManager | None = Depends(get_db_manager),
):
    """Readiness check — includes database connectivity."""
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
