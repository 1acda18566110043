"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api.models.responses import HealthResponse
from core.config import API_VERSION
from core.google_client import is_oauth_client_configured

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint for monitoring.

    Returns 200 if the OAuth client is configured, 503 otherwise.
    """
    configured = is_oauth_client_configured()
    timestamp = datetime.now(timezone.utc).isoformat()

    if configured:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            oauth_client_configured=True,
            timestamp=timestamp,
        )
    else:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                oauth_client_configured=False,
                timestamp=timestamp,
                error="Google OAuth client id/secret not configured",
            ).model_dump(),
        )
