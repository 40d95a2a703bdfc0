"""Tests for projecting slots onto the 7:00-23:00 axis."""

import pytest

from models.availability import DayEntry, TimeSlot
from services.timeline import HIDDEN, project, project_entry


def test_no_slot_is_hidden():
    assert project(None) is HIDDEN
    assert not project(None).visible


def test_slot_before_window_is_hidden():
    assert not project(TimeSlot(60, 120)).visible


def test_inverted_slot_is_hidden():
    assert not project(TimeSlot(600, 480)).visible


def test_regular_slot():
    projection = project(TimeSlot(480, 600))
    assert projection.visible
    assert projection.left_pct == pytest.approx(6.25)
    assert projection.width_pct == pytest.approx(12.5)


def test_open_start_extends_to_window_start():
    projection = project(TimeSlot(None, 600))
    assert projection.left_pct == pytest.approx(0.0)
    assert projection.width_pct == pytest.approx(18.75)


def test_open_end_extends_to_window_end():
    projection = project(TimeSlot(1200, None))
    assert projection.left_pct == pytest.approx(81.25)
    assert projection.width_pct == pytest.approx(18.75)


def test_bounds_are_clamped_to_window():
    projection = project(TimeSlot(300, 1439))
    assert projection.left_pct == pytest.approx(0.0)
    assert projection.width_pct == pytest.approx(100.0)


def test_project_entry():
    assert project_entry(DayEntry.all_day_entry()) == (HIDDEN, HIDDEN)
    assert project_entry(None) == (HIDDEN, HIDDEN)
    first, second = project_entry(DayEntry.timed(TimeSlot(480, 600)))
    assert first.visible
    assert second is HIDDEN
