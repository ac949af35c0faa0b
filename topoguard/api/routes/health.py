"""Health Check — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - No readiness check: the service holds no connections to become unready on
"""

from fastapi import APIRouter, status

from topoguard.config import get_settings

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": get_settings().service_name,
        "version": "1.0.0",
    }
