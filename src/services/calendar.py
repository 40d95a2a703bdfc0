"""
Month grid generation and per-cell calendar classification.
"""

import calendar
from dataclasses import dataclass
from datetime import date

from core.config import HOLIDAYS, WEEKDAY_NAMES
from models.availability import CalendarCell, DateKey, MonthPosition, MonthState


def _check_month(month0: int) -> None:
    if not 0 <= month0 <= 11:
        raise ValueError(f"Month index must be 0-11, got {month0}")


def days_in_month(year: int, month0: int) -> int:
    _check_month(month0)
    return calendar.monthrange(year, month0 + 1)[1]


def weekday_index(year: int, month0: int, day: int) -> int:
    """Weekday with 0 = Sunday, matching the grid's column order."""
    return (date(year, month0 + 1, day).weekday() + 1) % 7


def previous_month(year: int, month0: int) -> tuple[int, int]:
    return (year - 1, 11) if month0 == 0 else (year, month0 - 1)


def next_month(year: int, month0: int) -> tuple[int, int]:
    return (year + 1, 0) if month0 == 11 else (year, month0 + 1)


def build_month_grid(year: int, month0: int) -> list[CalendarCell]:
    """
    Build the Sunday-first display grid for a month.

    Leading cells count back from the last day of the previous month and
    trailing cells count forward from 1 in the next month, with the year
    rolling over at December/January. Length is always a multiple of 7.
    """
    _check_month(month0)
    leading = weekday_index(year, month0, 1)
    total_days = days_in_month(year, month0)
    rows = -(-(leading + total_days) // 7)

    prev_year, prev_month0 = previous_month(year, month0)
    prev_last = days_in_month(prev_year, prev_month0)
    next_year, next_month0 = next_month(year, month0)

    cells = [
        CalendarCell(prev_last - leading + 1 + i, MonthPosition.PREVIOUS, prev_year, prev_month0)
        for i in range(leading)
    ]
    cells.extend(
        CalendarCell(day, MonthPosition.CURRENT, year, month0)
        for day in range(1, total_days + 1)
    )
    trailing = rows * 7 - len(cells)
    cells.extend(
        CalendarCell(day, MonthPosition.NEXT, next_year, next_month0)
        for day in range(1, trailing + 1)
    )
    return cells


def is_holiday(year: int, month0: int, day: int) -> bool:
    return date(year, month0 + 1, day) in HOLIDAYS


def weekday_name(year: int, month0: int, day: int) -> str:
    return WEEKDAY_NAMES[weekday_index(year, month0, day)]


def is_today(cell: CalendarCell, today: date) -> bool:
    return cell.in_current_month and cell.key.to_date() == today


def month_label(year: int, month0: int) -> str:
    """Heading text, e.g. 'March 2025'."""
    return f"{calendar.month_name[month0 + 1]} {year}"


@dataclass(frozen=True)
class DayCellView:
    """What the renderer needs to paint one grid cell."""

    cell: CalendarCell
    key: str
    is_sunday: bool
    is_saturday: bool
    is_holiday: bool
    is_today: bool
    has_entry: bool
    summary_lines: list[str]


def describe_month(state: MonthState, today: date | None = None) -> list[DayCellView]:
    """Grid for the state's displayed month, joined with its stored entries."""
    today = today or date.today()
    views = []
    for cell in build_month_grid(state.year, state.month):
        key = str(cell.key)
        entry = state.days.get(key)
        weekday = cell.weekday
        views.append(
            DayCellView(
                cell=cell,
                key=key,
                is_sunday=weekday == 0,
                is_saturday=weekday == 6,
                is_holiday=is_holiday(cell.year, cell.month, cell.date),
                is_today=is_today(cell, today),
                has_entry=entry is not None and entry.has_visible_content(),
                summary_lines=entry.summary_lines() if entry else [],
            )
        )
    return views


def same_weekday_keys(source: DateKey) -> list[DateKey]:
    """Every date in the source's month sharing its weekday, source included."""
    month0 = source.month - 1
    return [
        DateKey(source.year, source.month, day)
        for day in range(1, days_in_month(source.year, month0) + 1)
        if weekday_index(source.year, month0, day) == source.weekday
    ]
