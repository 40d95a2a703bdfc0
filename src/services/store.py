"""
Month state store: the single owner of MonthState.

All mutation goes through this class so stored entries stay normalized
(no empty entries, all-day never mixed with slots) and every change that
should survive a reload is persisted.
"""

import logging
import sqlite3
from collections.abc import Iterable
from datetime import date

from core.config import STORAGE_KEY
from core.validation import decode_days, decode_month_state, encode_month_state
from models.availability import DateKey, DayEntry, MonthState, TimeSlot
from services.propagation import copy_to_explicit_dates, copy_to_same_weekday

logger = logging.getLogger(__name__)

# Errors a persistence collaborator may raise; anything else is a bug
PERSIST_ERRORS = (sqlite3.Error, OSError, TypeError, ValueError)


class MonthStateStore:
    """
    Owns the month state and writes it through a key-value collaborator.

    The collaborator needs get(key) -> str | None, set(key, str) and
    remove(key).
    """

    def __init__(self, kv, today: date | None = None):
        self.kv = kv
        self._today = today
        self.state = self.load_or_default()

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load_or_default(self) -> MonthState:
        today = self._today or date.today()
        try:
            raw = self.kv.get(STORAGE_KEY)
        except PERSIST_ERRORS as e:
            logger.warning("Could not read stored state, using defaults: %s", e)
            raw = None
        return decode_month_state(raw, today)

    def persist(self) -> bool:
        """Write the full state. Failures are logged; memory stays authoritative."""
        try:
            self.kv.set(STORAGE_KEY, encode_month_state(self.state))
        except PERSIST_ERRORS as e:
            logger.warning("Could not persist state: %s", e)
            return False
        return True

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def snapshot(self) -> MonthState:
        return self.state.copy()

    def get_day(self, key: DateKey) -> DayEntry | None:
        entry = self.state.days.get(str(key))
        return entry.copy() if entry else None

    # -------------------------------------------------------------------------
    # Day entries
    # -------------------------------------------------------------------------

    def _store_entry(self, key: DateKey, entry: DayEntry) -> DayEntry | None:
        if entry.has_visible_content():
            self.state.days[str(key)] = entry
        else:
            self.state.days.pop(str(key), None)
            entry = None
        self.persist()
        return entry.copy() if entry else None

    def save_day(
        self,
        key: DateKey,
        *,
        all_day: bool = False,
        slot1: TimeSlot | None = None,
        slot2: TimeSlot | None = None,
        notes: str = "",
    ) -> DayEntry | None:
        """
        Replace the day's entry. Slots are dropped when all_day is set.

        Returns the stored entry, or None when it had no content and the
        day was removed instead.
        """
        if all_day:
            entry = DayEntry.all_day_entry(notes)
        else:
            entry = DayEntry.timed(slot1, slot2, notes)
        return self._store_entry(key, entry)

    def set_all_day(self, key: DateKey) -> DayEntry:
        """Quick action: mark all-day, keeping any existing note."""
        entry = self.state.days.get(str(key)) or DayEntry()
        entry = entry.copy()
        entry.set_all_day(True)
        return self._store_entry(key, entry)

    def clear_day(self, key: DateKey) -> bool:
        removed = self.state.days.pop(str(key), None) is not None
        self.persist()
        return removed

    def copy_to_dates(self, source: DateKey, dates: Iterable[int]) -> int:
        count = copy_to_explicit_dates(
            self.state.days, source, dates, self.state.year, self.state.month
        )
        if count:
            self.persist()
        return count

    def copy_to_same_weekday(self, source: DateKey) -> int:
        count = copy_to_same_weekday(self.state.days, source)
        if count:
            self.persist()
        return count

    # -------------------------------------------------------------------------
    # Month
    # -------------------------------------------------------------------------

    def navigate_month(self, delta: int) -> tuple[int, int]:
        if delta not in (-1, 1):
            raise ValueError(f"Month step must be -1 or +1, got {delta}")
        month = self.state.month + delta
        if month < 0:
            self.state.year -= 1
            self.state.month = 11
        elif month > 11:
            self.state.year += 1
            self.state.month = 0
        else:
            self.state.month = month
        self.persist()
        return self.state.year, self.state.month

    def _drop_month_entries(self) -> int:
        prefix = DateKey.month_prefix(self.state.year, self.state.month)
        keys = [key for key in self.state.days if key.startswith(prefix)]
        for key in keys:
            del self.state.days[key]
        return len(keys)

    def clear_month(self) -> int:
        """Remove the displayed month's entries and its note. Returns entries removed."""
        removed = self._drop_month_entries()
        self.state.month_notes = ""
        self.persist()
        return removed

    def set_month_notes(self, notes: str | None) -> None:
        self.state.month_notes = notes or ""
        self.persist()

    def replace_month(self, raw_days, month_notes: str | None = None) -> int:
        """
        Replace the displayed month's entries with decoded remote data.

        Only entries that belong to the displayed month are taken; other
        months are left alone. Returns the number of entries stored.
        """
        prefix = DateKey.month_prefix(self.state.year, self.state.month)
        incoming = {
            key: entry for key, entry in decode_days(raw_days).items() if key.startswith(prefix)
        }
        self._drop_month_entries()
        self.state.days.update(incoming)
        if month_notes is not None:
            self.state.month_notes = month_notes
        self.persist()
        return len(incoming)

    # -------------------------------------------------------------------------
    # Submitter
    # -------------------------------------------------------------------------

    def set_employee_name(self, name: str | None) -> None:
        self.state.employee_name = (name or "").strip()
        self.persist()

    def mark_submitted(self) -> None:
        self.state.submitted = True
        self.persist()
