"""
Google Calendar client setup from per-request credentials.
"""

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from core.config import (
    GOOGLE_CALENDAR_SCOPES,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    GOOGLE_TOKEN_URI,
)
from models.events import CredentialContext


def build_credentials(context: CredentialContext) -> Credentials:
    """
    Build OAuth user credentials from a credential context.

    google-auth refreshes the access token itself when a refresh token and
    the OAuth client id/secret are available.
    """
    return Credentials(
        token=context.access_token,
        refresh_token=context.refresh_token,
        token_uri=GOOGLE_TOKEN_URI,
        client_id=GOOGLE_CLIENT_ID or None,
        client_secret=GOOGLE_CLIENT_SECRET or None,
        scopes=GOOGLE_CALENDAR_SCOPES,
    )


def build_calendar_service(context: CredentialContext):
    """Create a Calendar v3 service. Not thread-safe: build one per thread."""
    return build(
        "calendar",
        "v3",
        credentials=build_credentials(context),
        cache_discovery=False,
    )


def is_oauth_client_configured() -> bool:
    """True when tokens can be refreshed server-side."""
    return bool(GOOGLE_CLIENT_ID and GOOGLE_CLIENT_SECRET)
