"""
Parsing and formatting of time-of-day input.

Times are minutes since midnight. None means the bound was left unspecified.
"""

import re
from dataclasses import dataclass

from core.config import (
    EARLIEST_HOUR,
    LATEST_HOUR,
    PICKER_MINUTE_STEP,
    TIME_RANGE_END,
    TIME_RANGE_START,
)

PLACEHOLDER = "--:--"

_CLOCK_RE = re.compile(r"([0-9]{1,2}):([0-9]{1,2})")

# Full-width digits (U+FF10..U+FF19) and full-width colon
_HALF_WIDTH = str.maketrans(
    {**{chr(0xFF10 + i): str(i) for i in range(10)}, "：": ":"}
)


@dataclass(frozen=True)
class ParsedClock:
    """Outcome of parsing one clock string. Never raised, always returned."""

    minutes: int | None = None
    error: str | None = None

    @property
    def valid(self) -> bool:
        return self.error is None

    @property
    def unspecified(self) -> bool:
        return self.valid and self.minutes is None


def parse_clock_string(text: str | None) -> ParsedClock:
    """
    Parse 'H:MM' / 'HH:MM' into minutes.

    Empty input and the '--:--' placeholder are unspecified, not invalid.
    Anything outside 7:00-23:00 is invalid.
    """
    if text is None:
        return ParsedClock()
    if not isinstance(text, str):
        return ParsedClock(error=f"Expected a clock string, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped or stripped == PLACEHOLDER:
        return ParsedClock()

    match = _CLOCK_RE.fullmatch(stripped)
    if not match:
        return ParsedClock(error=f"Not a clock time: '{stripped}'")

    hour = int(match.group(1))
    minute = int(match.group(2))
    if not EARLIEST_HOUR <= hour <= LATEST_HOUR:
        return ParsedClock(error=f"Hour must be {EARLIEST_HOUR}-{LATEST_HOUR}, got {hour}")
    if minute > 59:
        return ParsedClock(error=f"Minute must be 0-59, got {minute}")

    minutes = hour * 60 + minute
    if not TIME_RANGE_START <= minutes <= TIME_RANGE_END:
        return ParsedClock(error=f"Time must be between 7:00 and 23:00, got '{stripped}'")
    return ParsedClock(minutes=minutes)


def normalize_digits_and_colon(text: str | None) -> str:
    """Convert full-width digits and colon to their ASCII forms."""
    if not text or not isinstance(text, str):
        return ""
    return text.translate(_HALF_WIDTH)


def auto_insert_colon(raw: str | None) -> str:
    """
    Progressive formatter for free-typed time input.

    '123' -> '12:3', '0930' -> '09:30'. With a colon already present each
    side is capped at two digits.
    """
    text = normalize_digits_and_colon(raw)
    colon = text.find(":")
    if colon == -1:
        digits = re.sub(r"[^0-9]", "", text)
        if len(digits) <= 2:
            return digits
        return f"{digits[:2]}:{digits[2:4]}"

    before = re.sub(r"[^0-9]", "", text[:colon])[:2]
    after = re.sub(r"[^0-9]", "", text[colon + 1:])[:2]
    return before + (f":{after}" if after else "")


def format_minutes_as_clock(minutes: int) -> str:
    """Display form: hour unpadded, minute padded (e.g. '7:05')."""
    return f"{minutes // 60}:{minutes % 60:02d}"


def format_minutes_for_input(minutes: int | None) -> str:
    """Input-field form: 'HH:MM', or '' for an unspecified bound."""
    if minutes is None:
        return ""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def hour_choices() -> list[int | None]:
    """Picker hours; the leading None is the 'unspecified' choice."""
    return [None, *range(EARLIEST_HOUR, LATEST_HOUR + 1)]


def minute_choices() -> list[int]:
    return list(range(0, 60, PICKER_MINUTE_STEP))
