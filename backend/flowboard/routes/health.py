"""
FlowBoard Backend: Health Check Route
=====================================

What:  GET /api/health for Docker health checks and load balancer probes.

The service has no dependency worth probing on every call: the stores are
in-process and the SMTP relay is only contacted per submission. A process
that can answer is healthy, whatever state the stores or earlier requests
left behind.
"""

from fastapi import APIRouter

from flowboard import __version__
from flowboard.models.base import utc_now
from flowboard.schemas.site import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=utc_now(), version=__version__)
