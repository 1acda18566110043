"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.errors import ProviderError  # noqa: E402
from models.events import CalendarPolicy, CredentialContext, EventTemplate  # noqa: E402


class FakeCalendarProvider:
    """In-memory stand-in for GoogleCalendarProvider."""

    def __init__(self, calendars=None, fail_dates=(), list_error=None):
        self.calendars = calendars or []
        self.fail_dates = set(fail_dates)
        self.list_error = list_error
        self.inserted = []

    async def list_calendars(self, credentials):
        if self.list_error:
            raise self.list_error
        return self.calendars

    async def insert_event(self, credentials, request):
        if request.date in self.fail_dates:
            raise ProviderError("Calendar API error: 403 Forbidden", status_code=403)
        self.inserted.append(request)
        return f"evt-{len(self.inserted)}"


@pytest.fixture
def fake_provider():
    return FakeCalendarProvider()


@pytest.fixture
def credentials():
    return CredentialContext(access_token="ya29.test-token", refresh_token="1//refresh")


@pytest.fixture
def shift_template():
    """Template from the 'Shift' scenario."""
    return EventTemplate(
        title="Shift",
        start_clock="09:00",
        end_clock="17:30",
        time_zone="Asia/Tokyo",
        color_id="10",
        calendar_id="primary",
        calendar_policy=CalendarPolicy.ZONED,
    )


@pytest.fixture
def shift_dates():
    return [date(2024, 6, 3), date(2024, 6, 10)]
