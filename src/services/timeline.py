"""
Projection of time slots onto the fixed 7:00-23:00 display axis.
"""

from dataclasses import dataclass

from core.config import TIME_CHART_SPAN, TIME_RANGE_END, TIME_RANGE_START
from models.availability import DayEntry, TimeSlot


@dataclass(frozen=True)
class SlotProjection:
    """Horizontal placement of a slot bar, in percent of the axis."""

    visible: bool
    left_pct: float = 0.0
    width_pct: float = 0.0


HIDDEN = SlotProjection(visible=False)


def project(slot: TimeSlot | None) -> SlotProjection:
    """
    Map a slot onto the axis.

    Open bounds extend to the window edge; concrete bounds are clamped to
    it. A slot that ends up with no width (outside the window or inverted)
    is hidden.
    """
    if slot is None or (slot.start is None and slot.end is None):
        return HIDDEN

    start = TIME_RANGE_START if slot.start is None else max(slot.start, TIME_RANGE_START)
    end = TIME_RANGE_END if slot.end is None else min(slot.end, TIME_RANGE_END)
    if end <= start:
        return HIDDEN

    return SlotProjection(
        visible=True,
        left_pct=(start - TIME_RANGE_START) / TIME_CHART_SPAN * 100,
        width_pct=(end - start) / TIME_CHART_SPAN * 100,
    )


def project_entry(entry: DayEntry | None) -> tuple[SlotProjection, SlotProjection]:
    """Both slot bars for a day; all-day entries show no bars."""
    if entry is None or entry.all_day:
        return HIDDEN, HIDDEN
    return project(entry.slot1), project(entry.slot2)
