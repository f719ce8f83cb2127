"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 if MongoDB does not answer a ping (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from phonebook.api.dependencies import get_phonebook_service
from phonebook.services.phonebook import PhonebookService

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check(
    phonebook: PhonebookService = Depends(get_phonebook_service),
):
    """Readiness probe — includes database connectivity."""
    if not await phonebook.is_ready():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
