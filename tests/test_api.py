"""Tests for the HTTP surface."""

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_calendar_provider
from api.main import app
from conftest import FakeCalendarProvider
from core import google_client
from core.config import DEFAULT_TIME_ZONE
from core.errors import ProviderError
from services.calendar import parse_calendar

client = TestClient(app)

AUTH_HEADERS = {"Authorization": "Bearer ya29.test-token", "X-Refresh-Token": "1//refresh"}

SHIFT_BODY = {
    "title": "Shift",
    "startTime": "09:00",
    "endTime": "17:30",
    "dates": ["2024-06-03", "2024-06-10"],
    "calendarId": "primary",
    "timeZone": "Asia/Tokyo",
    "colorId": "10",
}


@pytest.fixture
def provider():
    fake = FakeCalendarProvider(
        calendars=[
            parse_calendar({"id": "me@example.com", "summary": "Me", "primary": True}),
            parse_calendar({"id": "family42@group.calendar.google.com", "summary": "Family"}),
        ]
    )
    app.dependency_overrides[get_calendar_provider] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


# --- Health endpoint ---

def test_health_when_configured(monkeypatch):
    monkeypatch.setattr(google_client, "GOOGLE_CLIENT_ID", "client-id")
    monkeypatch.setattr(google_client, "GOOGLE_CLIENT_SECRET", "secret")
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_health_when_not_configured(monkeypatch):
    monkeypatch.setattr(google_client, "GOOGLE_CLIENT_ID", "")
    response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["oauth_client_configured"] is False


# --- Form options ---

def test_form_options():
    data = client.get("/form-options").json()
    assert len(data["clockGrid"]) == 48
    assert data["clockGrid"][0] == "00:00"
    assert data["clockGrid"][-1] == "23:30"
    assert data["colors"][0]["id"] == "10"
    assert data["defaults"]["startTime"] == "10:00"
    assert data["defaults"]["endTime"] == "17:00"
    assert data["defaults"]["timeZone"] == DEFAULT_TIME_ZONE


# --- Calendar list ---

def test_calendar_list(provider):
    response = client.get("/calendar-list", headers=AUTH_HEADERS)
    assert response.status_code == 200
    data = response.json()
    assert data[0]["id"] == "me@example.com"
    assert data[0]["primary"] is True
    assert data[1]["policy"] == "fixed_utc_plus_9"
    assert "backgroundColor" in data[0]


def test_calendar_list_requires_auth(provider):
    response = client.get("/calendar-list")
    assert response.status_code == 401
    assert response.json()["detail"]["code"] == "UNAUTHORIZED"


def test_calendar_list_rejects_non_bearer(provider):
    response = client.get("/calendar-list", headers={"Authorization": "Basic abc"})
    assert response.status_code == 401


def test_calendar_list_provider_failure(provider):
    provider.list_error = ProviderError("Calendar API error", status_code=500)
    response = client.get("/calendar-list", headers=AUTH_HEADERS)
    assert response.status_code == 500
    assert response.json()["detail"]["error"] == "Failed to fetch calendar list"


# --- Event creation ---

def test_create_events(provider):
    response = client.post("/calendar-events", json=SHIFT_BODY, headers=AUTH_HEADERS)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["created"] == 2
    assert [r["date"] for r in data["results"]] == ["2024-06-03", "2024-06-10"]
    assert provider.inserted[0].start == datetime(2024, 6, 3, 0, 0, tzinfo=timezone.utc)


def test_create_events_accepts_serialized_datetimes(provider):
    body = {**SHIFT_BODY, "dates": ["2024-06-03T00:00:00.000Z", "2024-06-03T00:00:00.000Z"]}
    response = client.post("/calendar-events", json=body, headers=AUTH_HEADERS)
    assert response.status_code == 200
    assert response.json()["created"] == 1


def test_create_events_family_calendar(provider):
    body = {**SHIFT_BODY, "calendarId": "family42@group.calendar.google.com", "timeZone": "UTC"}
    response = client.post("/calendar-events", json=body, headers=AUTH_HEADERS)
    assert response.status_code == 200
    assert provider.inserted[0].start == datetime(2024, 6, 3, 0, 0, tzinfo=timezone.utc)


def test_create_events_explicit_policy_wins(provider):
    body = {**SHIFT_BODY, "calendarId": "family42@group.calendar.google.com", "calendarPolicy": "zoned"}
    response = client.post("/calendar-events", json=body, headers=AUTH_HEADERS)
    assert response.status_code == 200
    # Asia/Tokyo is UTC+9 too, so the zoned path lands on the same instant
    assert provider.inserted[0].start == datetime(2024, 6, 3, 0, 0, tzinfo=timezone.utc)


def test_create_events_requires_auth(provider):
    response = client.post("/calendar-events", json=SHIFT_BODY)
    assert response.status_code == 401
    assert provider.inserted == []


@pytest.mark.parametrize("field", ["title", "startTime", "endTime", "calendarId", "timeZone", "colorId"])
def test_create_events_missing_field(provider, field):
    body = {key: value for key, value in SHIFT_BODY.items() if key != field}
    response = client.post("/calendar-events", json=body, headers=AUTH_HEADERS)
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "VALIDATION_ERROR"
    assert provider.inserted == []


def test_create_events_empty_dates(provider):
    response = client.post("/calendar-events", json={**SHIFT_BODY, "dates": []}, headers=AUTH_HEADERS)
    assert response.status_code == 400
    assert "Select at least one date" in response.json()["detail"]["details"]


def test_create_events_malformed_date(provider):
    response = client.post(
        "/calendar-events", json={**SHIFT_BODY, "dates": ["not-a-date"]}, headers=AUTH_HEADERS
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"


def test_create_events_partial_failure(provider):
    provider.fail_dates = {date(2024, 6, 10)}
    response = client.post("/calendar-events", json=SHIFT_BODY, headers=AUTH_HEADERS)
    assert response.status_code == 500
    detail = response.json()["detail"]
    assert detail["error"] == "Failed to create events"
    assert detail["details"] == ["1 of 2 events created"]
    assert len(provider.inserted) == 1


def test_create_events_invalid_json(provider):
    response = client.post(
        "/calendar-events",
        content=b"{",
        headers={**AUTH_HEADERS, "Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"
    assert provider.inserted == []


def test_create_events_skipped_clock_rejected(provider):
    body = {
        **SHIFT_BODY,
        "startTime": "02:30",
        "endTime": "03:00",
        "dates": ["2024-03-09", "2024-03-10"],
        "timeZone": "America/New_York",
    }
    response = client.post("/calendar-events", json=body, headers=AUTH_HEADERS)
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["code"] == "VALIDATION_ERROR"
    assert detail["details"] == ["02:30 does not exist on 2024-03-10 in America/New_York"]
    assert provider.inserted == []
