#!/usr/bin/env python3
"""
Create one Google Calendar event per date from the command line.

Reads GOOGLE_ACCESS_TOKEN / GOOGLE_REFRESH_TOKEN from the environment.

Usage:
    uv run python src/scripts/create_events.py --dates 2024-06-03 2024-06-10 \\
        --start 09:00 --end 17:30 --time-zone Asia/Tokyo
"""

import argparse
import asyncio
import sys
from datetime import date, datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import (
    DEFAULT_COLOR_ID,
    DEFAULT_END_CLOCK,
    DEFAULT_EVENT_TITLE,
    DEFAULT_START_CLOCK,
    DEFAULT_TIME_ZONE,
    GOOGLE_ACCESS_TOKEN,
    GOOGLE_REFRESH_TOKEN,
)
from core.errors import UnauthenticatedError, ValidationError
from core.timezones import resolve_calendar_policy
from models.events import CredentialContext, DateSelection, EventTemplate, SubmissionState
from services.calendar import GoogleCalendarProvider
from services.submission import SubmissionOrchestrator


def parse_date(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date '{value}', expected YYYY-MM-DD")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bulk-create calendar events")
    parser.add_argument("--dates", nargs="+", type=parse_date, required=True, help="YYYY-MM-DD dates")
    parser.add_argument("--title", default=DEFAULT_EVENT_TITLE, help="Event title")
    parser.add_argument("--start", default=DEFAULT_START_CLOCK, help="Start time (HH:MM)")
    parser.add_argument("--end", default=DEFAULT_END_CLOCK, help="End time (HH:MM)")
    parser.add_argument("--time-zone", default=DEFAULT_TIME_ZONE, help="IANA time zone")
    parser.add_argument("--color", default=DEFAULT_COLOR_ID, help="Event color id")
    parser.add_argument("--calendar", default="primary", help="Calendar id")
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    credentials = CredentialContext(
        access_token=GOOGLE_ACCESS_TOKEN or None,
        refresh_token=GOOGLE_REFRESH_TOKEN or None,
    )
    template = EventTemplate(
        title=args.title,
        start_clock=args.start,
        end_clock=args.end,
        time_zone=args.time_zone,
        color_id=args.color,
        calendar_id=args.calendar,
        calendar_policy=resolve_calendar_policy(args.calendar),
    )
    selection = DateSelection(args.dates)
    orchestrator = SubmissionOrchestrator(GoogleCalendarProvider(), selection)

    print(f"Creating {len(selection)} events in {args.calendar}...")
    try:
        outcome = await orchestrator.submit(template, credentials)
    except UnauthenticatedError:
        print("GOOGLE_ACCESS_TOKEN is not set")
        return 1
    except ValidationError as e:
        for detail in e.details:
            print(f"  Invalid: {detail}")
        return 1

    for result in outcome.results:
        if result.ok:
            print(f"  Created: {result.date.isoformat()} ({result.event_id})")
        else:
            print(f"  Failed:  {result.date.isoformat()}: {result.error}")

    if outcome.state is SubmissionState.SUCCEEDED:
        print(f"\nDone! {outcome.created} events created.")
        return 0

    print(f"\n{outcome.reason}: {outcome.created} of {len(outcome.results)} created.")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
