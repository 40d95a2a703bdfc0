"""
Data models for availability entries and month state.

DayEntry is only changed through its updater methods so the all-day /
time-slot exclusivity holds after every call.
"""

import re
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from core.config import ALL_DAY_LABEL, TIME_ANY
from core.timeparse import format_minutes_as_clock

MINUTES_PER_DAY = 24 * 60

# Accepts both "2025-03-02" and the legacy unpadded "2025-3-2"
_DATE_KEY_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")


@dataclass(frozen=True, order=True)
class DateKey:
    """One calendar date. Month is 1-based; text form is YYYY-MM-DD."""

    year: int
    month: int
    day: int

    def __post_init__(self):
        # Raises ValueError for impossible dates (Feb 30, month 13, ...)
        date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, d: date) -> "DateKey":
        return cls(d.year, d.month, d.day)

    @classmethod
    def parse(cls, text: str) -> "DateKey":
        match = _DATE_KEY_RE.fullmatch(text.strip()) if isinstance(text, str) else None
        if not match:
            raise ValueError(f"Malformed date key: {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    @staticmethod
    def month_prefix(year: int, month0: int) -> str:
        """Key prefix shared by every date of a month (0-based month)."""
        return f"{year:04d}-{month0 + 1:02d}-"

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        """Weekday index with 0 = Sunday."""
        return (self.to_date().weekday() + 1) % 7

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def _check_minutes(value: int | None, name: str) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be minutes as int, got {value!r}")
    if not 0 <= value < MINUTES_PER_DAY:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True)
class TimeSlot:
    """
    One availability window in minutes since midnight.

    A bound of None is unspecified: start-only means "from X",
    end-only means "until X". At least one bound must be set.
    """

    start: int | None = None
    end: int | None = None

    def __post_init__(self):
        _check_minutes(self.start, "start")
        _check_minutes(self.end, "end")
        if self.start is None and self.end is None:
            raise ValueError("A time slot needs at least one bound")

    @classmethod
    def from_bounds(cls, start: int | None, end: int | None) -> "TimeSlot | None":
        """Build a slot, or None when both bounds are unspecified."""
        if start is None and end is None:
            return None
        return cls(start, end)

    def label(self) -> str:
        start = format_minutes_as_clock(self.start) if self.start is not None else ""
        end = format_minutes_as_clock(self.end) if self.end is not None else ""
        return f"{start}-{end}"

    def to_dict(self) -> dict:
        return {
            "start": TIME_ANY if self.start is None else self.start,
            "end": TIME_ANY if self.end is None else self.end,
        }


def slot_has_content(slot: TimeSlot | None) -> bool:
    return slot is not None and (slot.start is not None or slot.end is not None)


class DayEntry:
    """
    Availability recorded for one date.

    Fields are read-only; change them through the updaters below.
    """

    __slots__ = ("_all_day", "_slot1", "_slot2", "_notes")

    def __init__(
        self,
        all_day: bool = False,
        slot1: TimeSlot | None = None,
        slot2: TimeSlot | None = None,
        notes: str | None = "",
    ):
        if all_day and (slot1 is not None or slot2 is not None):
            raise ValueError("An all-day entry cannot carry time slots")
        self._all_day = bool(all_day)
        self._slot1 = slot1
        self._slot2 = slot2
        self._notes = notes or ""

    @property
    def all_day(self) -> bool:
        return self._all_day

    @property
    def slot1(self) -> TimeSlot | None:
        return self._slot1

    @property
    def slot2(self) -> TimeSlot | None:
        return self._slot2

    @property
    def notes(self) -> str:
        return self._notes

    def _fields(self) -> tuple:
        return (self._all_day, self._slot1, self._slot2, self._notes)

    def __eq__(self, other):
        if not isinstance(other, DayEntry):
            return NotImplemented
        return self._fields() == other._fields()

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"DayEntry(all_day={self._all_day!r}, slot1={self._slot1!r}, "
            f"slot2={self._slot2!r}, notes={self._notes!r})"
        )

    @classmethod
    def all_day_entry(cls, notes: str = "") -> "DayEntry":
        return cls(all_day=True, notes=notes.strip())

    @classmethod
    def timed(
        cls, slot1: TimeSlot | None = None, slot2: TimeSlot | None = None, notes: str = ""
    ) -> "DayEntry":
        return cls(all_day=False, slot1=slot1, slot2=slot2, notes=notes.strip())

    # -------------------------------------------------------------------------
    # Updaters
    # -------------------------------------------------------------------------

    def set_all_day(self, all_day: bool = True) -> None:
        if all_day:
            self._slot1 = None
            self._slot2 = None
        self._all_day = bool(all_day)

    def set_slots(self, slot1: TimeSlot | None, slot2: TimeSlot | None) -> None:
        self._all_day = False
        self._slot1 = slot1
        self._slot2 = slot2

    def set_notes(self, notes: str | None) -> None:
        self._notes = (notes or "").strip()

    def clear(self) -> None:
        self._all_day = False
        self._slot1 = None
        self._slot2 = None
        self._notes = ""

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_availability(self) -> bool:
        """All-day or at least one bounded slot (notes not counted)."""
        return self.all_day or slot_has_content(self.slot1) or slot_has_content(self.slot2)

    def has_visible_content(self) -> bool:
        return self.has_availability() or bool(self.notes.strip())

    def summary_lines(self) -> list[str]:
        if self.all_day:
            return [ALL_DAY_LABEL]
        return [slot.label() for slot in (self.slot1, self.slot2) if slot_has_content(slot)]

    def summary(self) -> str:
        return " / ".join(self.summary_lines())

    def copy(self) -> "DayEntry":
        # TimeSlot is frozen, so sharing slot instances is safe
        return DayEntry(
            all_day=self.all_day, slot1=self.slot1, slot2=self.slot2, notes=self.notes
        )

    def to_dict(self) -> dict:
        return {
            "allDay": self.all_day,
            "slot1": self.slot1.to_dict() if self.slot1 else None,
            "slot2": self.slot2.to_dict() if self.slot2 else None,
            "notes": self.notes,
        }


class MonthPosition(str, Enum):
    """Which month a calendar grid cell belongs to."""

    CURRENT = "current"
    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class CalendarCell:
    """Generated grid cell. Month is 0-based."""

    date: int
    belongs_to: MonthPosition
    year: int
    month: int

    @property
    def key(self) -> DateKey:
        return DateKey(self.year, self.month + 1, self.date)

    @property
    def weekday(self) -> int:
        return self.key.weekday

    @property
    def in_current_month(self) -> bool:
        return self.belongs_to is MonthPosition.CURRENT


@dataclass
class MonthState:
    """Everything the store owns. Month is 0-based; days are keyed by str(DateKey)."""

    year: int
    month: int
    month_notes: str = ""
    days: dict[str, DayEntry] = field(default_factory=dict)
    submitted: bool = False
    employee_name: str = ""

    def copy(self) -> "MonthState":
        return MonthState(
            year=self.year,
            month=self.month,
            month_notes=self.month_notes,
            days={key: entry.copy() for key, entry in self.days.items()},
            submitted=self.submitted,
            employee_name=self.employee_name,
        )

    def month_days(self) -> dict[str, DayEntry]:
        """Entries belonging to the displayed month, in date order."""
        prefix = DateKey.month_prefix(self.year, self.month)
        return {key: self.days[key] for key in sorted(self.days) if key.startswith(prefix)}

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "monthNotes": self.month_notes,
            "days": {key: self.days[key].to_dict() for key in sorted(self.days)},
            "submitted": self.submitted,
            "employeeName": self.employee_name,
        }
