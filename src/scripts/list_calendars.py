#!/usr/bin/env python3
"""
List the Google calendars visible to the configured tokens.

Reads GOOGLE_ACCESS_TOKEN / GOOGLE_REFRESH_TOKEN from the environment.

Usage:
    uv run python src/scripts/list_calendars.py
"""

import asyncio
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import GOOGLE_ACCESS_TOKEN, GOOGLE_REFRESH_TOKEN
from core.errors import CalendarError
from models.events import CredentialContext
from services.calendar import GoogleCalendarProvider


async def main() -> int:
    """List calendars, primary first."""
    credentials = CredentialContext(
        access_token=GOOGLE_ACCESS_TOKEN or None,
        refresh_token=GOOGLE_REFRESH_TOKEN or None,
    )
    if not credentials.is_authenticated:
        print("GOOGLE_ACCESS_TOKEN is not set")
        return 1

    print("Fetching calendars from Google...\n")
    try:
        calendars = await GoogleCalendarProvider().list_calendars(credentials)
    except CalendarError as e:
        print(f"Error fetching calendars: {e}")
        return 1

    print(f"Found {len(calendars)} calendars\n")
    print("=" * 80)

    for cal in calendars:
        marker = " (primary)" if cal["primary"] else ""
        print(f"\n{cal['summary']}{marker}")
        print(f"  ID: {cal['id']}")
        print(f"  Policy: {cal['policy'].value}")
        if cal["description"]:
            print(f"  Description: {cal['description']}")
        if cal["background_color"]:
            print(f"  Color: {cal['background_color']}")

    print("-" * 80)
    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
