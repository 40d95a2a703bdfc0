"""
Decoding and validation of stored / fetched availability payloads.

Payloads come from storage written by older clients or from the remote
sheet service, so every field is checked on its own and falls back to a
default instead of failing the whole load.
"""

import json
import logging
from datetime import date

from core.config import TIME_ANY
from core.timeparse import normalize_digits_and_colon, parse_clock_string
from models.availability import MINUTES_PER_DAY, DateKey, DayEntry, MonthState, TimeSlot

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def decode_time_of_day(value) -> int | None:
    """Wire value -> minutes. -1, null and anything unusable become None."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not _is_int(value) or value == TIME_ANY:
        return None
    if not 0 <= value < MINUTES_PER_DAY:
        return None
    return value


def decode_time_slot(raw) -> TimeSlot | None:
    if not isinstance(raw, dict):
        return None
    return TimeSlot.from_bounds(
        decode_time_of_day(raw.get("start")), decode_time_of_day(raw.get("end"))
    )


def decode_day_entry(raw) -> DayEntry | None:
    """
    Decode one day record.

    Returns None for records with nothing visible in them, so empty
    entries never make it back into the store.
    """
    if not isinstance(raw, dict):
        return None

    notes = raw.get("notes")
    notes = notes.strip() if isinstance(notes, str) else ""

    if raw.get("allDay") is True:
        entry = DayEntry.all_day_entry(notes)
    else:
        entry = DayEntry.timed(
            decode_time_slot(raw.get("slot1")), decode_time_slot(raw.get("slot2")), notes
        )

    return entry if entry.has_visible_content() else None


def decode_days(raw) -> dict[str, DayEntry]:
    """Decode a date-key -> entry mapping, re-keying into the padded form."""
    if not isinstance(raw, dict):
        return {}

    days: dict[str, DayEntry] = {}
    for raw_key, raw_entry in raw.items():
        try:
            key = DateKey.parse(raw_key)
        except ValueError:
            logger.warning("Skipping day with malformed key %r", raw_key)
            continue
        entry = decode_day_entry(raw_entry)
        if entry is not None:
            days[str(key)] = entry
    return days


def decode_month_state(raw_text: str | None, today: date) -> MonthState:
    """
    Rehydrate MonthState from its serialized form.

    Each field is defaulted independently: a corrupt 'days' still keeps a
    valid 'year', and unreadable text yields a fresh state for today.
    """
    state = MonthState(year=today.year, month=today.month - 1)
    if not raw_text:
        return state

    try:
        parsed = json.loads(raw_text)
    except (TypeError, ValueError):
        logger.warning("Stored state is not valid JSON; starting fresh")
        return state
    if not isinstance(parsed, dict):
        logger.warning("Stored state is not an object; starting fresh")
        return state

    year = parsed.get("year")
    if _is_int(year) and 1 <= year <= 9999:
        state.year = year

    month = parsed.get("month")
    if _is_int(month) and 0 <= month <= 11:
        state.month = month

    month_notes = parsed.get("monthNotes")
    if isinstance(month_notes, str):
        state.month_notes = month_notes

    state.days = decode_days(parsed.get("days"))

    submitted = parsed.get("submitted")
    if isinstance(submitted, bool):
        state.submitted = submitted

    employee_name = parsed.get("employeeName")
    if isinstance(employee_name, str):
        state.employee_name = employee_name

    return state


def encode_month_state(state: MonthState) -> str:
    return json.dumps(state.to_dict(), ensure_ascii=False)


def parse_slot_input(
    start_text: str | None, end_text: str | None, field_prefix: str = "slot"
) -> tuple[TimeSlot | None, list[str]]:
    """
    Parse the two clock fields of a slot.

    Full-width digits and colon are accepted. A bound that doesn't parse is
    reported in the returned field errors and left out of the slot, so the
    other bound still counts. Returns None for the slot when neither bound
    is usable.
    """
    errors = []
    bounds = []
    for name, text in (("Start", start_text), ("End", end_text)):
        parsed = parse_clock_string(normalize_digits_and_colon(text))
        if not parsed.valid:
            errors.append(f"{field_prefix}{name}: {parsed.error}")
        bounds.append(parsed.minutes)

    return TimeSlot.from_bounds(*bounds), errors
