"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 unless both the database and the photo
      directory are usable; "checks" names the state of each
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from planet_api import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "planet-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe: planets can be read and photos can be stored."""
    state = request.app.state
    checks = {
        "database": await state.db_manager.health_check(),
        "photo_store": await run_in_threadpool(state.photo_store.is_writable),
    }
    body = {
        name: "healthy" if ok else "unavailable" for name, ok in checks.items()
    }
    if not all(checks.values()):
        logger.warning(f"Not ready: {body}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": body},
        )
    return {"status": "ready", "checks": body}
