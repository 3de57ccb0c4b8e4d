"""Health check endpoint."""

import time
from fastapi import APIRouter

from xlf_checker.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Liveness check. The linter has no external dependencies to probe."""
    return HealthResponse(
        status="healthy",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
