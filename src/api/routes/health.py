"""Service health endpoint."""

from fastapi import APIRouter, Depends

from api.schemas import HealthResponse
from config import Settings, get_settings

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report service status and whether listing lookups are enabled.",
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Return service status and listing lookup availability."""
    return HealthResponse(
        service=settings.service_name,
        version=settings.version,
        listing_lookup=bool(settings.google_places_api_key),
    )
