"""API Pydantic models."""

from .requests import CreateEventsRequest
from .responses import (
    CalendarSummary,
    CreateEventsResponse,
    ErrorCodes,
    ErrorResponse,
    FormOptionsResponse,
    HealthResponse,
)

__all__ = [
    "CalendarSummary",
    "CreateEventsRequest",
    "CreateEventsResponse",
    "ErrorCodes",
    "ErrorResponse",
    "FormOptionsResponse",
    "HealthResponse",
]
