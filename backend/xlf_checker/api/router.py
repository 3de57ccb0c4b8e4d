"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from xlf_checker.api.health import router as health_router
from xlf_checker.api.checks import router as checks_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Document linting
api_router.include_router(checks_router, tags=["Checks"])
