"""Health check endpoints."""

from fastapi import APIRouter, status

from medsearch_service.config import settings
from medsearch_service.schemas.health import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check endpoint",
    description=(
        "Returns service health status. No authentication required. This "
        "endpoint does NOT use the /api/v1 prefix."
    ),
)
async def health_check() -> HealthResponse:
    """Health check endpoint.

    The service is stateless and holds no connections, so being able to
    answer means it is healthy.
    """
    return HealthResponse(status="ok", version=settings.app_version)
