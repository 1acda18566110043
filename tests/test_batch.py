"""Tests for per-date event request construction."""

import types
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

from models.events import CalendarPolicy
from services.batch import build_batch


def test_shift_scenario(shift_template, shift_dates):
    requests = list(build_batch(shift_template, shift_dates))

    assert len(requests) == 2
    assert [r.date for r in requests] == shift_dates
    for request in requests:
        assert request.end - request.start == timedelta(hours=8, minutes=30)
        assert request.summary == "Shift"
        assert request.color_id == "10"
        assert request.calendar_id == "primary"
        assert request.time_zone == "Asia/Tokyo"


def test_preserves_input_order(shift_template):
    dates = [date(2024, 6, 10), date(2024, 6, 1), date(2024, 6, 5)]
    assert [r.date for r in build_batch(shift_template, dates)] == dates


def test_empty_dates_yield_nothing(shift_template):
    assert list(build_batch(shift_template, [])) == []


def test_is_lazy_and_one_shot(shift_template, shift_dates):
    batch = build_batch(shift_template, shift_dates)
    assert isinstance(batch, types.GeneratorType)
    assert len(list(batch)) == 2
    assert list(batch) == []


def test_fixed_offset_calendar(shift_template):
    template = replace(
        shift_template,
        calendar_id="family01@group.calendar.google.com",
        calendar_policy=CalendarPolicy.FIXED_UTC_PLUS_9,
    )
    (request,) = build_batch(template, [date(2024, 6, 3)])
    assert request.start == datetime(2024, 6, 3, 0, 0, tzinfo=timezone.utc)
    assert request.end == datetime(2024, 6, 3, 8, 30, tzinfo=timezone.utc)
