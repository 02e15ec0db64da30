"""
Health check endpoint.

Provides system health status for monitoring and load balancers.
"""

from fastapi import APIRouter

from atm_withdrawal import __version__
from atm_withdrawal.api.schemas import HealthResponse
from atm_withdrawal.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Check system health.

    The calculator has no external dependencies, so a running process
    is a healthy one.
    """
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        version=__version__,
        denominations=list(settings.denomination_set),
    )
