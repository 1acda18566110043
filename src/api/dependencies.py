"""FastAPI dependencies for authentication and shared resources."""

from fastapi import Header, HTTPException, status

from api.models.responses import ErrorCodes
from models.events import CredentialContext
from services.calendar import GoogleCalendarProvider

_calendar_provider: GoogleCalendarProvider | None = None


def get_calendar_provider() -> GoogleCalendarProvider:
    """Get or create the calendar provider (lazy initialization)."""
    global _calendar_provider
    if _calendar_provider is None:
        _calendar_provider = GoogleCalendarProvider()
    return _calendar_provider


def parse_bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an 'Authorization: Bearer <token>' header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_credentials(
    authorization: str | None = Header(None),
    x_refresh_token: str | None = Header(None, alias="X-Refresh-Token"),
) -> CredentialContext:
    """
    Build the credential context from request headers.

    Raises:
        HTTPException: 401 if no bearer token is present
    """
    credentials = CredentialContext(
        access_token=parse_bearer_token(authorization),
        refresh_token=x_refresh_token or None,
    )
    if not credentials.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={
                "error": "Not authenticated",
                "code": ErrorCodes.UNAUTHORIZED,
                "details": [],
            },
        )
    return credentials
