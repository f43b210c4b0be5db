"""
FlowBoard Backend: Site Stats Route
===================================

What:  GET /api/stats, the headline numbers on the landing page.

The figures are fixed marketing copy, not computed from the stores.
"""

from fastapi import APIRouter

from flowboard.schemas.site import StatsResponse

router = APIRouter(prefix="/api", tags=["Site"])

PLATFORM_STATS = StatsResponse(
    total_users=12500,
    projects_completed=38500,
    teams_using=2400,
    satisfaction_rate=98.5,
)


@router.get("/stats", response_model=StatsResponse, summary="Landing-page statistics")
async def get_stats() -> StatsResponse:
    return PLATFORM_STATS
