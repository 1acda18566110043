"""
Exception types raised by the calendar core.
"""


class CalendarError(Exception):
    """Base class for errors surfaced to API and script callers."""


class UnauthenticatedError(CalendarError):
    """No usable bearer credential was supplied."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class ValidationError(CalendarError):
    """Submission rejected before any provider call."""

    def __init__(self, details: list[str]):
        self.details = details
        super().__init__("; ".join(details))


class ProviderError(CalendarError):
    """The calendar provider rejected a request."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class NetworkError(CalendarError):
    """Transport-level failure talking to the provider."""
