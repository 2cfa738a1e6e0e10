"""Health & Readiness Checks - liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 unless LLM and mail credentials are configured
    - Readiness never calls the external services and never echoes secrets
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from meeting_summarizer import __version__
from meeting_summarizer.config import Settings, get_settings

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "meeting-summarizer",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """Readiness check - credentials for both external services."""
    checks = {
        "llm": "configured" if settings.llm_configured else "missing",
        "email": "configured" if settings.email_configured else "missing",
    }
    if not (settings.llm_configured and settings.email_configured):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "checks": checks},
        )
    return {"status": "ready", "checks": checks}
