"""
Calendar listing and event creation against Google Calendar.
"""

import asyncio
import logging

import httplib2
from google.auth.exceptions import GoogleAuthError, RefreshError
from googleapiclient.errors import HttpError

from core.errors import NetworkError, ProviderError
from core.google_client import build_calendar_service
from core.timezones import format_instant, resolve_calendar_policy
from models.events import CalendarInfo, CredentialContext, EventRequest

logger = logging.getLogger(__name__)


def parse_calendar(item: dict) -> CalendarInfo:
    """Parse a calendarList entry into our format, resolving its policy."""
    calendar_id = item.get("id", "")
    return {
        "id": calendar_id,
        "summary": item.get("summary", ""),
        "description": item.get("description"),
        "primary": bool(item.get("primary", False)),
        "background_color": item.get("backgroundColor"),
        "policy": resolve_calendar_policy(calendar_id),
    }


def sort_primary_first(calendars: list[CalendarInfo]) -> list[CalendarInfo]:
    """Move the primary calendar to the front, keeping provider order otherwise."""
    return sorted(calendars, key=lambda calendar: not calendar["primary"])


def build_event_body(request: EventRequest) -> dict:
    """Google Calendar events.insert request body."""
    return {
        "summary": request.summary,
        "start": {"dateTime": format_instant(request.start), "timeZone": request.time_zone},
        "end": {"dateTime": format_instant(request.end), "timeZone": request.time_zone},
        "colorId": request.color_id,
    }


def _translate_error(exc: Exception) -> Exception:
    if isinstance(exc, HttpError):
        return ProviderError(f"Calendar API error: {exc}", status_code=exc.resp.status)
    if isinstance(exc, RefreshError):
        return ProviderError(f"Token refresh rejected: {exc}", status_code=401)
    return NetworkError(f"Could not reach calendar provider: {exc}")


_PROVIDER_ERRORS = (HttpError, GoogleAuthError, httplib2.HttpLib2Error, OSError)


class GoogleCalendarProvider:
    """
    Async facade over the blocking Google API client.

    Each call builds its own service object inside a worker thread, so
    concurrent inserts never share an HTTP transport.
    """

    def _list_calendars_sync(self, credentials: CredentialContext) -> list[dict]:
        service = build_calendar_service(credentials)
        items = []
        page_token = None
        while True:
            response = service.calendarList().list(pageToken=page_token).execute()
            items.extend(response.get("items", []))
            page_token = response.get("nextPageToken")
            if not page_token:
                break
        return items

    def _insert_event_sync(self, credentials: CredentialContext, request: EventRequest) -> str:
        service = build_calendar_service(credentials)
        created = service.events().insert(
            calendarId=request.calendar_id,
            body=build_event_body(request),
        ).execute()
        return created.get("id", "")

    async def list_calendars(self, credentials: CredentialContext) -> list[CalendarInfo]:
        """
        Fetch every calendar visible to the credential, primary first.

        Raises:
            ProviderError: the API rejected the request
            NetworkError: the API could not be reached
        """
        try:
            items = await asyncio.to_thread(self._list_calendars_sync, credentials)
        except _PROVIDER_ERRORS as e:
            raise _translate_error(e) from e

        calendars = sort_primary_first([parse_calendar(item) for item in items])
        logger.info("Fetched %d calendars", len(calendars))
        return calendars

    async def insert_event(self, credentials: CredentialContext, request: EventRequest) -> str:
        """Insert one event and return its provider id."""
        try:
            event_id = await asyncio.to_thread(self._insert_event_sync, credentials, request)
        except _PROVIDER_ERRORS as e:
            raise _translate_error(e) from e

        logger.debug("Created event %s on %s for %s", event_id, request.calendar_id, request.date)
        return event_id
