"""Calendar list and bulk event creation endpoints."""

import time

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import get_calendar_provider, require_credentials
from api.logging import RequestLog, log_request
from api.models.requests import CreateEventsRequest
from api.models.responses import (
    CalendarSummary,
    ColorOption,
    CreateEventsResponse,
    ErrorCodes,
    EventResultResponse,
    FormDefaults,
    FormOptionsResponse,
)
from core.config import (
    CLOCK_GRID,
    DEFAULT_COLOR_ID,
    DEFAULT_END_CLOCK,
    DEFAULT_EVENT_TITLE,
    DEFAULT_START_CLOCK,
    DEFAULT_TIME_ZONE,
    EVENT_COLORS,
)
from core.errors import CalendarError, UnauthenticatedError, ValidationError
from models.events import CredentialContext, DateSelection
from services.submission import FAILURE_REASON, submit

router = APIRouter()


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def _record_http_error(request_log: RequestLog, e: HTTPException) -> None:
    request_log.status_code = e.status_code
    if isinstance(e.detail, dict):
        request_log.error_code = e.detail.get("code")
        request_log.error_message = e.detail.get("error")
        for detail in e.detail.get("details", []):
            request_log.details.append(("error", detail))
    else:
        request_log.error_message = str(e.detail)


@router.get("/form-options", response_model=FormOptionsResponse)
async def form_options():
    """Clock grid, color palette and default values for the event form."""
    return FormOptionsResponse(
        clock_grid=CLOCK_GRID,
        colors=[ColorOption(**color) for color in EVENT_COLORS],
        defaults=FormDefaults(
            title=DEFAULT_EVENT_TITLE,
            start_time=DEFAULT_START_CLOCK,
            end_time=DEFAULT_END_CLOCK,
            color_id=DEFAULT_COLOR_ID,
            time_zone=DEFAULT_TIME_ZONE,
        ),
    )


@router.get("/calendar-list", response_model=list[CalendarSummary])
async def calendar_list(
    request: Request,
    credentials: CredentialContext = Depends(require_credentials),
    provider=Depends(get_calendar_provider),
):
    """List calendars visible to the caller, primary calendar first."""
    start_time = time.time()
    request_log = RequestLog(
        endpoint="/calendar-list",
        method="GET",
        client_ip=get_client_ip(request),
    )

    try:
        calendars = await provider.list_calendars(credentials)
        request_log.status_code = 200
        return [CalendarSummary(**calendar) for calendar in calendars]

    except CalendarError as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.PROVIDER_ERROR
        request_log.error_message = str(e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "Failed to fetch calendar list",
                "code": ErrorCodes.PROVIDER_ERROR,
                "details": [],
            },
        )

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        log_request(request_log)


@router.post("/calendar-events", response_model=CreateEventsResponse)
async def create_calendar_events(
    request: Request,
    body: CreateEventsRequest,
    credentials: CredentialContext = Depends(require_credentials),
    provider=Depends(get_calendar_provider),
):
    """
    Create one event per date in the body.

    Returns 200 only when every event was created. Events created before a
    failure are left in place.
    """
    start_time = time.time()
    template = body.to_template()
    selection = DateSelection(body.dates or [])

    request_log = RequestLog(
        endpoint="/calendar-events",
        method="POST",
        client_ip=get_client_ip(request),
        calendar_id=template.calendar_id or None,
        events_requested=len(selection),
    )

    try:
        try:
            outcome = await submit(template, selection, credentials, provider)
        except UnauthenticatedError:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={
                    "error": "Not authenticated",
                    "code": ErrorCodes.UNAUTHORIZED,
                    "details": [],
                },
            )
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "error": "Missing or invalid fields",
                    "code": ErrorCodes.VALIDATION_ERROR,
                    "details": e.details,
                },
            )

        request_log.events_created = outcome.created
        if outcome.failed:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail={
                    "error": FAILURE_REASON,
                    "code": ErrorCodes.PROVIDER_ERROR,
                    "details": [f"{outcome.created} of {len(outcome.results)} events created"],
                },
            )

        request_log.status_code = 200
        return CreateEventsResponse(
            success=True,
            created=outcome.created,
            results=[
                EventResultResponse(date=r.date, ok=r.ok, event_id=r.event_id, error=r.error)
                for r in outcome.results
            ],
        )

    except HTTPException as e:
        _record_http_error(request_log, e)
        raise

    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = ErrorCodes.INTERNAL_ERROR
        request_log.error_message = str(e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": FAILURE_REASON,
                "code": ErrorCodes.INTERNAL_ERROR,
                "details": [],
            },
        )

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        log_request(request_log)
