"""Pydantic request models for API endpoints."""

from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from core.timezones import resolve_calendar_policy
from models.events import CalendarPolicy, EventTemplate


class CreateEventsRequest(BaseModel):
    """
    POST /calendar-events body.

    Every field is optional at the schema level so that missing or empty
    values are reported by submission validation as a 400.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    dates: list[date] | None = None
    calendar_id: str | None = None
    time_zone: str | None = None
    color_id: str | None = None
    calendar_policy: CalendarPolicy | None = None

    @field_validator("dates", mode="before")
    @classmethod
    def strip_time_component(cls, value):
        """Accept serialized datetimes ('2024-06-03T00:00:00.000Z') as dates."""
        if isinstance(value, list):
            return [item[:10] if isinstance(item, str) and "T" in item else item for item in value]
        return value

    def to_template(self) -> EventTemplate:
        calendar_id = self.calendar_id or ""
        return EventTemplate(
            title=self.title or "",
            start_clock=self.start_time or "",
            end_clock=self.end_time or "",
            time_zone=self.time_zone or "",
            color_id=self.color_id or "",
            calendar_id=calendar_id,
            calendar_policy=self.calendar_policy or resolve_calendar_policy(calendar_id),
        )
