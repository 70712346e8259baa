"""
Liveness routes for the Storefront backend.

Both endpoints are PUBLIC and exist only to show the server is reachable:
- GET /        plain-text banner
- GET /health  JSON status for load balancers and monitoring
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from storefront.schemas.health import HealthResponse
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

SERVICE_BANNER = "AI Recommendation API (Gemini) is running"

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter(tags=["system"])


@router.get(
    "/",
    response_class=PlainTextResponse,
    summary="Liveness banner",
)
async def root() -> str:
    """Simple route to confirm server status."""
    return SERVICE_BANNER


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description=(
        "Public health check endpoint (no authentication required). "
        "Returns a simple status indicator for monitoring and load balancing."
    ),
    status_code=200,
)
async def health_check() -> HealthResponse:
    """
    Public health check endpoint.

    Example response:
        {
            "status": "ok"
        }
    """
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
