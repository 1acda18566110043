"""Pydantic response models for API endpoints."""

import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.events import CalendarPolicy


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    oauth_client_configured: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CalendarSummary(CamelModel):
    """One entry of GET /calendar-list."""

    id: str
    summary: str
    description: str | None = None
    primary: bool = False
    background_color: str | None = None
    policy: CalendarPolicy = CalendarPolicy.ZONED


class EventResultResponse(CamelModel):
    date: datetime.date
    ok: bool
    event_id: str | None = None
    error: str | None = None


class CreateEventsResponse(CamelModel):
    """Successful POST /calendar-events response."""

    success: bool
    created: int
    results: list[EventResultResponse] = []


class ColorOption(BaseModel):
    id: str
    name: str
    color: str


class FormDefaults(CamelModel):
    title: str
    start_time: str
    end_time: str
    color_id: str
    time_zone: str


class FormOptionsResponse(CamelModel):
    """Values the form offers: clock grid, colors and defaults."""

    clock_grid: list[str]
    colors: list[ColorOption]
    defaults: FormDefaults
