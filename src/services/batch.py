"""
Per-date event request construction.
"""

from collections.abc import Iterable, Iterator
from datetime import date

from core.timezones import normalize
from models.events import EventRequest, EventTemplate


def build_batch(template: EventTemplate, dates: Iterable[date]) -> Iterator[EventRequest]:
    """
    Yield one EventRequest per date, in input order.

    Lazy and side-effect free; callers own dispatch.
    """
    for day in dates:
        start, end = normalize(
            day,
            template.start_clock,
            template.end_clock,
            template.calendar_policy,
            template.time_zone,
        )
        yield EventRequest(
            calendar_id=template.calendar_id,
            date=day,
            start=start,
            end=end,
            time_zone=template.time_zone,
            summary=template.title,
            color_id=template.color_id,
        )
