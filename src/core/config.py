"""
Configuration constants and environment setup.
"""

import os
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(
    os.environ.get("SHIFT_DB_PATH", str(PROJECT_ROOT / "data" / "db" / "shift-availability.db"))
)
OUTPUT_DIR = PROJECT_ROOT / "output"

# =============================================================================
# STORAGE KEYS
# =============================================================================

STORAGE_KEY = "shiftHopeApp"
STORAGE_KEY_ENDPOINT_URL = "shiftHopeAppGasUrl"  # user-configured URL, overrides the built-in one

# =============================================================================
# REMOTE SERVICE
# =============================================================================

# Distributed builds set this so employees don't have to configure anything
BUILTIN_ENDPOINT_URL = os.environ.get("SHIFT_APP_ENDPOINT_URL", "").strip()

# =============================================================================
# TIME WINDOW
# =============================================================================

TIME_RANGE_START = 7 * 60  # 7:00 = 420
TIME_RANGE_END = 23 * 60  # 23:00 = 1380
TIME_CHART_SPAN = TIME_RANGE_END - TIME_RANGE_START  # 960

EARLIEST_HOUR = 7
LATEST_HOUR = 23
PICKER_MINUTE_STEP = 5

# Wire encoding of an unspecified bound
TIME_ANY = -1

# =============================================================================
# CALENDAR
# =============================================================================

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

ALL_DAY_LABEL = "All day"
NOTES_ONLY_LABEL = "(notes only)"

# National holidays (Japan). Extend with new years as the cabinet office publishes them.
HOLIDAYS = {
    date(2025, 1, 1), date(2025, 1, 13), date(2025, 2, 11), date(2025, 2, 23),
    date(2025, 2, 24), date(2025, 3, 20), date(2025, 4, 29), date(2025, 5, 3),
    date(2025, 5, 4), date(2025, 5, 5), date(2025, 5, 6), date(2025, 7, 21),
    date(2025, 8, 11), date(2025, 9, 15), date(2025, 9, 23), date(2025, 10, 13),
    date(2025, 11, 3), date(2025, 11, 24),
    date(2026, 1, 1), date(2026, 1, 12), date(2026, 2, 11), date(2026, 2, 23),
    date(2026, 3, 20), date(2026, 4, 29), date(2026, 5, 3), date(2026, 5, 4),
    date(2026, 5, 5), date(2026, 5, 6), date(2026, 7, 20), date(2026, 8, 11),
    date(2026, 9, 21), date(2026, 9, 23), date(2026, 10, 12), date(2026, 11, 3),
    date(2026, 11, 23),
    date(2027, 1, 1), date(2027, 1, 11), date(2027, 2, 11), date(2027, 2, 23),
    date(2027, 3, 21), date(2027, 4, 29), date(2027, 5, 3), date(2027, 5, 4),
    date(2027, 5, 5), date(2027, 5, 6), date(2027, 7, 19), date(2027, 8, 11),
    date(2027, 9, 20), date(2027, 9, 23), date(2027, 10, 11), date(2027, 11, 3),
    date(2027, 11, 23),
}

# =============================================================================
# REPORT CONFIGURATION
# =============================================================================

LISTING_HEADERS = ["Date", "Weekday", "Availability", "Notes"]

# =============================================================================
# API CONFIGURATION
# =============================================================================

API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
