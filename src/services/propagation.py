"""
Copying one day's entry onto other dates.

Targets are overwritten, never merged: anything stored there before,
notes included, is replaced by an independent copy of the source.
"""

import re
from collections.abc import Iterable

from core.timeparse import normalize_digits_and_colon
from models.availability import DateKey, DayEntry
from services.calendar import days_in_month, same_weekday_keys


def parse_target_dates(text: str | None) -> list[int]:
    """
    Parse a typed list of days such as '15, 16 20' into day numbers.

    Separators are commas (ASCII or full-width) and whitespace. Tokens that
    aren't numbers 1-31 are dropped.
    """
    if not text:
        return []
    dates = []
    for token in re.split(r"[,，\s]+", normalize_digits_and_colon(text)):
        if re.fullmatch(r"[0-9]{1,2}", token) and 1 <= int(token) <= 31:
            dates.append(int(token))
    return dates


def copy_to_explicit_dates(
    days: dict[str, DayEntry],
    source: DateKey,
    target_dates: Iterable[int],
    year: int,
    month0: int,
) -> int:
    """
    Copy the source entry onto the given days of (year, month0).

    Days outside the month and the source date itself are skipped.
    Returns the number of dates written; 0 when the source has no entry.
    """
    entry = days.get(str(source))
    if entry is None:
        return 0

    last_day = days_in_month(year, month0)
    count = 0
    for day in sorted(set(target_dates)):
        if not 1 <= day <= last_day:
            continue
        target = DateKey(year, month0 + 1, day)
        if target == source:
            continue
        days[str(target)] = entry.copy()
        count += 1
    return count


def copy_to_same_weekday(days: dict[str, DayEntry], source: DateKey) -> int:
    """Copy the source entry onto every other same-weekday date of its month."""
    entry = days.get(str(source))
    if entry is None:
        return 0

    count = 0
    for target in same_weekday_keys(source):
        if target == source:
            continue
        days[str(target)] = entry.copy()
        count += 1
    return count
