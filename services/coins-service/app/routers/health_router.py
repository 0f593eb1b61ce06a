"""
Health check and service information router.

Static responses; these endpoints never touch the combination logic.
"""

from fastapi import APIRouter, status

from ..config import settings
from ..models import HealthResponse, ServiceInfoResponse

router = APIRouter(tags=["health"])

ENDPOINTS = {
    "/": "API information",
    "/health": "Health check",
    "/random": "Get a random coin combination",
    "/all": "Get all possible coin combinations (16 total)",
    "/all/{index}": "Get the coin combination for a bitmask index (0-15)",
    "/value": "Value a caller-supplied list of coins (POST)",
    "/metrics": "Prometheus metrics",
}


@router.get(
    "/",
    response_model=ServiceInfoResponse,
    summary="Service information",
    description="Service name, version and available endpoints",
)
async def root() -> ServiceInfoResponse:
    """Root endpoint with API information."""
    return ServiceInfoResponse(
        service=settings.APP_NAME,
        version=settings.VERSION,
        endpoints=ENDPOINTS,
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
    description="Basic health check endpoint - returns 200 if service is running",
)
async def health_check() -> HealthResponse:
    """
    Basic health check.

    Always returns 200 OK if the service is running.
    Used by load balancers and orchestrators for liveness probes.
    """
    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        version=settings.VERSION,
    )
