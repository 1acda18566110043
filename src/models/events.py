"""
Data models for event templates, requests and submission outcomes.

CalendarInfo is a TypedDict since it is built straight from provider
payloads; the rest are dataclasses.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Iterable, Iterator, TypedDict


class CalendarPolicy(str, Enum):
    """How clock values are turned into instants for a calendar."""

    ZONED = "zoned"
    FIXED_UTC_PLUS_9 = "fixed_utc_plus_9"


class CalendarInfo(TypedDict):
    """Calendar list entry."""
    id: str
    summary: str
    description: str | None
    primary: bool
    background_color: str | None
    policy: CalendarPolicy


@dataclass(frozen=True)
class CredentialContext:
    """Bearer/refresh token pair for one request. Never persisted."""

    access_token: str | None = None
    refresh_token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.access_token)


@dataclass(frozen=True)
class EventTemplate:
    """Fields shared by every event of one submission."""

    title: str
    start_clock: str
    end_clock: str
    time_zone: str
    color_id: str
    calendar_id: str
    calendar_policy: CalendarPolicy = CalendarPolicy.ZONED


@dataclass(frozen=True)
class EventRequest:
    """One materialized event insert for a single date."""

    calendar_id: str
    date: date
    start: datetime
    end: datetime
    time_zone: str
    summary: str
    color_id: str


class DateSelection:
    """
    Ordered set of calendar days.

    Iteration follows insertion order; duplicates (same year, month, day)
    are ignored. Datetimes are reduced to their date.
    """

    def __init__(self, dates: Iterable[date] = ()):
        self._dates: dict[date, None] = {}
        for day in dates:
            self.add(day)

    @staticmethod
    def _as_date(day: date) -> date:
        if isinstance(day, datetime):
            return day.date()
        return day

    def add(self, day: date) -> None:
        self._dates.setdefault(self._as_date(day), None)

    def remove(self, day: date) -> None:
        self._dates.pop(self._as_date(day), None)

    def toggle(self, day: date) -> bool:
        """Select the day if absent, deselect it otherwise. Returns new state."""
        day = self._as_date(day)
        if day in self._dates:
            del self._dates[day]
            return False
        self._dates[day] = None
        return True

    def clear(self) -> None:
        self._dates.clear()

    def sorted(self) -> list[date]:
        return sorted(self._dates)

    def __contains__(self, day: object) -> bool:
        if isinstance(day, date):
            return self._as_date(day) in self._dates
        return False

    def __iter__(self) -> Iterator[date]:
        return iter(list(self._dates))

    def __len__(self) -> int:
        return len(self._dates)

    def __repr__(self) -> str:
        return f"DateSelection({[d.isoformat() for d in self._dates]})"


@dataclass
class EventResult:
    """Result of one event insert."""

    date: date
    ok: bool
    event_id: str | None = None
    error: str | None = None


class SubmissionState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SubmissionOutcome:
    """Aggregated state of a submission, with per-date results."""

    state: SubmissionState = SubmissionState.IDLE
    reason: str | None = None
    results: list[EventResult] = field(default_factory=list)

    @property
    def created(self) -> int:
        return sum(1 for result in self.results if result.ok)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.ok)

    @property
    def is_partial(self) -> bool:
        """Some events were created but not all."""
        return self.created > 0 and self.failed > 0
