"""
Configuration constants and environment setup.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# GOOGLE OAUTH CLIENT (from environment)
# =============================================================================

GOOGLE_CLIENT_ID = os.environ.get("GOOGLE_CLIENT_ID", "")
GOOGLE_CLIENT_SECRET = os.environ.get("GOOGLE_CLIENT_SECRET", "")
GOOGLE_TOKEN_URI = os.environ.get("GOOGLE_TOKEN_URI", "https://oauth2.googleapis.com/token")
GOOGLE_CALENDAR_SCOPES = ["https://www.googleapis.com/auth/calendar"]

# Used by the command-line scripts only; the API takes tokens per request
GOOGLE_ACCESS_TOKEN = os.environ.get("GOOGLE_ACCESS_TOKEN", "")
GOOGLE_REFRESH_TOKEN = os.environ.get("GOOGLE_REFRESH_TOKEN", "")

# =============================================================================
# CALENDAR CONFIGURATION
# =============================================================================

# Calendars whose id contains this marker are pinned to UTC+9 wall time
FIXED_OFFSET_CALENDAR_MARKER = os.environ.get("FIXED_OFFSET_CALENDAR_MARKER", "family")
FIXED_OFFSET_HOURS = 9

DEFAULT_TIME_ZONE = os.environ.get("DEFAULT_TIME_ZONE", "Asia/Tokyo")

# =============================================================================
# FORM CONFIGURATION
# =============================================================================

# Half-hour grid: "00:00", "00:30", ... "23:30"
CLOCK_GRID = [f"{i // 2:02d}:{'00' if i % 2 == 0 else '30'}" for i in range(48)]

# Google Calendar event color tokens, default first
EVENT_COLORS = [
    {"id": "10", "name": "Basil", "color": "#0B8043"},
    {"id": "1", "name": "Lavender", "color": "#7986CB"},
    {"id": "2", "name": "Sage", "color": "#33B679"},
    {"id": "3", "name": "Grape", "color": "#8E24AA"},
    {"id": "4", "name": "Flamingo", "color": "#E67C73"},
    {"id": "5", "name": "Banana", "color": "#F6BF26"},
    {"id": "6", "name": "Tangerine", "color": "#F4511E"},
    {"id": "7", "name": "Peacock", "color": "#039BE5"},
    {"id": "8", "name": "Graphite", "color": "#616161"},
    {"id": "9", "name": "Blueberry", "color": "#3F51B5"},
]
VALID_COLOR_IDS = {color["id"] for color in EVENT_COLORS}

DEFAULT_EVENT_TITLE = "Shift"
DEFAULT_START_CLOCK = "10:00"
DEFAULT_END_CLOCK = "17:00"
DEFAULT_COLOR_ID = "10"

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
