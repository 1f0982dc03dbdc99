"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter

from image_relay.config import settings
from image_relay.models.response import HealthResponse


router = APIRouter(prefix="/api")


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health() -> HealthResponse:
    """Report liveness and whether an API key is configured."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return HealthResponse(
        status="OK",
        timestamp=timestamp.replace("+00:00", "Z"),
        hasApiKey=bool(settings.google_api_key),
    )
