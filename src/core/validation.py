"""
Submission validation.
"""

from collections.abc import Collection, Iterable
from datetime import date
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from core.config import CLOCK_GRID, VALID_COLOR_IDS
from core.timezones import normalize, parse_clock, wall_time_exists
from models.events import CalendarPolicy, EventTemplate

REQUIRED_FIELDS = {
    "title": "title",
    "start_clock": "startTime",
    "end_clock": "endTime",
    "calendar_id": "calendarId",
    "time_zone": "timeZone",
    "color_id": "colorId",
}


def is_valid_time_zone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def validate_submission(template: EventTemplate, dates: Collection[date]) -> list[str]:
    """
    Validate a template and date selection before dispatch.

    Checks:
    1. Required fields are present and non-blank
    2. At least one date is selected
    3. Clock values are on the half-hour grid, color and zone are known
    4. End clock is after start clock
    5. Both clocks exist on every date and each start precedes its end

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    # Check 1: Required fields
    for attr, field_name in REQUIRED_FIELDS.items():
        value = getattr(template, attr)
        if not value or not str(value).strip():
            errors.append(f"Missing required field '{field_name}'")

    # Check 2: Dates
    if len(dates) == 0:
        errors.append("Select at least one date")

    # Check 3: Known values (skip fields already reported missing)
    start_clock = (template.start_clock or "").strip()
    end_clock = (template.end_clock or "").strip()
    if start_clock and template.start_clock not in CLOCK_GRID:
        errors.append(f"Invalid startTime '{template.start_clock}'")
    if end_clock and template.end_clock not in CLOCK_GRID:
        errors.append(f"Invalid endTime '{template.end_clock}'")
    if template.color_id and template.color_id not in VALID_COLOR_IDS:
        errors.append(f"Invalid colorId '{template.color_id}'")
    if template.time_zone and not is_valid_time_zone(template.time_zone):
        errors.append(f"Unknown timeZone '{template.time_zone}'")

    # Check 4: Ordering (only meaningful once both clocks are valid)
    if template.start_clock in CLOCK_GRID and template.end_clock in CLOCK_GRID:
        if parse_clock(template.end_clock) <= parse_clock(template.start_clock):
            errors.append(
                f"endTime '{template.end_clock}' must be after startTime '{template.start_clock}'"
            )

    # Check 5: Per-date instants, once the template itself is valid
    if not errors:
        errors.extend(_check_instants(template, dates))

    return errors


def _check_instants(template: EventTemplate, dates: Iterable[date]) -> list[str]:
    """Reject clocks skipped by a clock change and any start not before its end."""
    errors = []
    for day in dates:
        if template.calendar_policy is CalendarPolicy.ZONED:
            missing = [
                clock
                for clock in (template.start_clock, template.end_clock)
                if not wall_time_exists(day, clock, template.time_zone)
            ]
            if missing:
                errors.append(
                    f"{', '.join(missing)} does not exist on {day.isoformat()} in {template.time_zone}"
                )
                continue
        start, end = normalize(
            day,
            template.start_clock,
            template.end_clock,
            template.calendar_policy,
            template.time_zone,
        )
        if start >= end:
            errors.append(f"Event on {day.isoformat()} would end before it starts")
    return errors
