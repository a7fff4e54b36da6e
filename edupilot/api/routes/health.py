"""
Health Check Routes - System health and monitoring endpoints.

These endpoints are used for:
1. Load balancer health checks
2. Container liveness probes
3. Quick system status verification
"""
from fastapi import APIRouter

from edupilot import __version__
from edupilot.core.logging_config import get_logger
from edupilot.models.ai import HealthResponse

logger = get_logger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"],
)


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """
    Perform a basic health check.

    This endpoint verifies that the API is running and responsive.
    It does not check database or LLM connectivity.
    """
    logger.debug("Health check requested")

    return HealthResponse(status="healthy", version=__version__)
