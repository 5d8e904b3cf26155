"""
Module 06 - Health Check Route

Simple health check endpoint for liveness probes.
"""

from fastapi import APIRouter

from api.models.responses import HealthResponse


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Does not touch the whitelist source, so it stays green while the
    source is unavailable.
    """
    return HealthResponse(ok=True)


@router.get("/", response_model=HealthResponse)
async def index() -> HealthResponse:
    """
    Root endpoint - same as health check.
    """
    return HealthResponse(ok=True)
