"""Tests for month grid generation and cell classification."""

from datetime import date

import pytest

from models.availability import DateKey, DayEntry, MonthPosition, MonthState, TimeSlot
from services.calendar import (
    build_month_grid,
    days_in_month,
    describe_month,
    is_holiday,
    is_today,
    month_label,
    same_weekday_keys,
    weekday_name,
)


def test_february_2025_grid():
    cells = build_month_grid(2025, 1)
    assert len(cells) == 35

    leading = cells[:6]
    assert [c.date for c in leading] == [26, 27, 28, 29, 30, 31]
    assert all(c.belongs_to is MonthPosition.PREVIOUS for c in leading)
    assert all((c.year, c.month) == (2025, 0) for c in leading)

    assert cells[6].date == 1
    assert cells[6].belongs_to is MonthPosition.CURRENT
    assert cells[33].date == 28

    assert cells[34].date == 1
    assert cells[34].belongs_to is MonthPosition.NEXT
    assert (cells[34].year, cells[34].month) == (2025, 2)


def test_december_rolls_into_next_year():
    cells = build_month_grid(2025, 11)
    trailing = [c for c in cells if c.belongs_to is MonthPosition.NEXT]
    assert [c.date for c in trailing] == [1, 2, 3]
    assert all((c.year, c.month) == (2026, 0) for c in trailing)


def test_january_borrows_from_previous_year():
    cells = build_month_grid(2026, 0)
    leading = [c for c in cells if c.belongs_to is MonthPosition.PREVIOUS]
    assert [c.date for c in leading] == [28, 29, 30, 31]
    assert all((c.year, c.month) == (2025, 11) for c in leading)


def test_month_starting_on_sunday_has_no_padding():
    cells = build_month_grid(2026, 1)
    assert len(cells) == 28
    assert all(c.in_current_month for c in cells)


@pytest.mark.parametrize("year", [2024, 2025, 2026, 2100])
def test_grid_length_invariant(year):
    for month0 in range(12):
        cells = build_month_grid(year, month0)
        leading = sum(1 for c in cells if c.belongs_to is MonthPosition.PREVIOUS)
        assert len(cells) % 7 == 0
        assert len(cells) >= leading + days_in_month(year, month0)
        assert len(cells) - leading - days_in_month(year, month0) < 7
        # Columns are Sunday-first
        assert all(c.weekday == i % 7 for i, c in enumerate(cells))


def test_invalid_month_index():
    with pytest.raises(ValueError):
        build_month_grid(2025, 12)


def test_days_in_month_handles_leap_years():
    assert days_in_month(2024, 1) == 29
    assert days_in_month(2025, 1) == 28


def test_holiday_and_weekday_lookup():
    assert is_holiday(2025, 1, 11)
    assert not is_holiday(2025, 1, 12)
    assert weekday_name(2025, 2, 2) == "Sun"


def test_today_only_marks_current_month_cell():
    cells = build_month_grid(2025, 1)
    assert [c.date for c in cells if is_today(c, date(2025, 2, 14))] == [14]
    # Jan 31 appears as padding in February's grid but is not "today" there
    assert not any(is_today(c, date(2025, 1, 31)) for c in cells)


def test_month_label():
    assert month_label(2025, 2) == "March 2025"


def test_describe_month_joins_entries():
    state = MonthState(
        year=2025,
        month=2,
        days={
            "2025-03-03": DayEntry.timed(TimeSlot(480, 600)),
            "2025-03-04": DayEntry.timed(notes="Dentist at noon"),
        },
    )
    views = {v.key: v for v in describe_month(state, today=date(2025, 3, 3))}

    monday = views["2025-03-03"]
    assert monday.has_entry
    assert monday.summary_lines == ["8:00-10:00"]
    assert monday.is_today

    note_only = views["2025-03-04"]
    assert note_only.has_entry
    assert note_only.summary_lines == []

    assert views["2025-03-02"].is_sunday
    assert views["2025-03-01"].is_saturday
    assert views["2025-03-20"].is_holiday


def test_same_weekday_keys():
    keys = same_weekday_keys(DateKey(2025, 3, 10))
    assert [k.day for k in keys] == [3, 10, 17, 24, 31]
