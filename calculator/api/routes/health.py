"""Health Probe - liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - No readiness variant: the service has no downstream dependencies
"""

from fastapi import APIRouter, Request, status

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": request.app.state.settings.service_name,
        "version": request.app.version,
    }
