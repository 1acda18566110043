"""
Wall-clock to absolute-instant conversion for event times.

Every zone is passed in explicitly; nothing here reads the host's local zone.
"""

from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo

from core.config import FIXED_OFFSET_CALENDAR_MARKER, FIXED_OFFSET_HOURS
from models.events import CalendarPolicy


def parse_clock(clock: str) -> tuple[int, int]:
    """Split an 'HH:MM' grid value into (hour, minute)."""
    hours, minutes = clock.split(":")
    return int(hours), int(minutes)


def resolve_calendar_policy(calendar_id: str) -> CalendarPolicy:
    """
    Decide how a calendar's clock values map to instants.

    Called once per calendar when the list is fetched (or once per request
    when the client did not send a policy), never during normalization.
    """
    if FIXED_OFFSET_CALENDAR_MARKER and FIXED_OFFSET_CALENDAR_MARKER.lower() in calendar_id.lower():
        return CalendarPolicy.FIXED_UTC_PLUS_9
    return CalendarPolicy.ZONED


def _zoned_instant(day: date, clock: str, zone: ZoneInfo) -> datetime:
    hour, minute = parse_clock(clock)
    local = datetime.combine(day, time(hour, minute), tzinfo=zone)
    return local.astimezone(timezone.utc)


def wall_time_exists(day: date, clock: str, time_zone: str) -> bool:
    """False when the clock falls in a gap skipped by a forward clock change."""
    zone = ZoneInfo(time_zone)
    local = datetime.combine(day, time(*parse_clock(clock)), tzinfo=zone)
    round_trip = local.astimezone(timezone.utc).astimezone(zone)
    return round_trip.replace(tzinfo=None) == local.replace(tzinfo=None)


def _fixed_offset_instant(day: date, clock: str) -> datetime:
    # Offset applied to the hour directly; rolls into the previous day for early clocks
    hour, minute = parse_clock(clock)
    wall = datetime.combine(day, time(hour, minute), tzinfo=timezone.utc)
    return wall - timedelta(hours=FIXED_OFFSET_HOURS)


def normalize(
    day: date,
    start_clock: str,
    end_clock: str,
    policy: CalendarPolicy,
    time_zone: str,
) -> tuple[datetime, datetime]:
    """
    Convert a date plus start/end clock values into UTC instants.

    Args:
        day: Calendar day of the event
        start_clock: 'HH:MM' start on the half-hour grid
        end_clock: 'HH:MM' end on the half-hour grid
        policy: CalendarPolicy resolved for the target calendar
        time_zone: IANA zone the clock values are expressed in (ZONED only)

    Returns:
        Tuple of (start, end) as timezone-aware UTC datetimes
    """
    if policy is CalendarPolicy.FIXED_UTC_PLUS_9:
        return _fixed_offset_instant(day, start_clock), _fixed_offset_instant(day, end_clock)

    zone = ZoneInfo(time_zone)
    return _zoned_instant(day, start_clock, zone), _zoned_instant(day, end_clock, zone)


def format_instant(instant: datetime) -> str:
    """Format an aware datetime as 'YYYY-MM-DDTHH:MM:SSZ'."""
    return instant.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
