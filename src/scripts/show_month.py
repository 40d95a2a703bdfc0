#!/usr/bin/env python3
"""
Print the stored month as a calendar grid followed by the submission listing.

Usage:
    uv run python src/scripts/show_month.py
    uv run python src/scripts/show_month.py --year 2025 --month 3
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import WEEKDAY_NAMES
from core.database import SqliteKeyValueStore
from models.availability import MonthState
from services.calendar import describe_month, month_label
from services.reports import format_listing
from services.store import MonthStateStore

CELL_WIDTH = 14


def format_cell(view) -> str:
    """One grid cell: day number with markers, then the first summary line."""
    marker = ""
    if view.is_holiday:
        marker += "H"
    if view.is_today:
        marker += "*"
    day = f"{view.cell.date}{marker}"
    if not view.cell.in_current_month:
        day = f"({day})"
    summary = view.summary_lines[0] if view.summary_lines else ""
    if view.has_entry and not summary:
        summary = "note"
    return f"{day} {summary}"[:CELL_WIDTH].ljust(CELL_WIDTH)


def render_grid(state: MonthState) -> str:
    lines = [month_label(state.year, state.month), ""]
    lines.append("".join(name.ljust(CELL_WIDTH) for name in WEEKDAY_NAMES))
    views = describe_month(state)
    for row_start in range(0, len(views), 7):
        lines.append("".join(format_cell(v) for v in views[row_start:row_start + 7]))
    return "\n".join(lines)


def main(year: int | None = None, month: int | None = None):
    """Main entry point."""
    store = MonthStateStore(SqliteKeyValueStore())
    state = store.snapshot()
    if year is not None:
        state.year = year
    if month is not None:
        state.month = month - 1

    print(render_grid(state))
    print()
    if state.employee_name:
        print(f"Employee: {state.employee_name}")
    print(f"Submitted: {'yes' if state.submitted else 'no'}")
    print()
    print(format_listing(state))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Show stored shift availability")
    parser.add_argument("--year", type=int, help="Year to show. Defaults to the stored month.")
    parser.add_argument(
        "--month", type=int, choices=range(1, 13), help="Month (1-12). Defaults to the stored month."
    )
    args = parser.parse_args()

    main(args.year, args.month)
