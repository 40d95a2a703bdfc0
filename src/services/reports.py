"""
Submission listing and Excel export of a month's availability.
"""

from dataclasses import dataclass
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font

from core.config import LISTING_HEADERS, NOTES_ONLY_LABEL, WEEKDAY_NAMES
from models.availability import DateKey, DayEntry, MonthState


def format_date_display(key: DateKey) -> str:
    """Format date as M/D (no zero-padding)."""
    return f"{key.month}/{key.day}"


@dataclass(frozen=True)
class ListingRow:
    key: DateKey
    entry: DayEntry

    @property
    def availability(self) -> str:
        return self.entry.summary() or NOTES_ONLY_LABEL

    def line(self) -> str:
        text = f"{format_date_display(self.key)} … {self.availability}"
        if self.entry.notes:
            text += f"  Notes: {self.entry.notes}"
        return text


def submission_listing(state: MonthState) -> list[ListingRow]:
    """Displayed-month entries with visible content, in date order."""
    return [
        ListingRow(DateKey.parse(key), entry)
        for key, entry in state.month_days().items()
        if entry.has_visible_content()
    ]


def format_listing(state: MonthState) -> str:
    """Plain-text confirmation listing."""
    rows = submission_listing(state)
    lines = [f"Month notes: {state.month_notes or '(none)'}", ""]
    if rows:
        lines.extend(row.line() for row in rows)
    else:
        lines.append("No dates entered.")
    return "\n".join(lines)


def write_listing_sheet(ws, state: MonthState):
    """
    Write the listing to an Excel worksheet.

    Headers: Date, Weekday, Availability, Notes. Month notes go in a
    trailing row after one blank row.
    """
    for col_idx, header in enumerate(LISTING_HEADERS, start=1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = Font(bold=True)

    rows = submission_listing(state)
    for row_idx, row in enumerate(rows, start=2):
        row_data = [
            format_date_display(row.key),
            WEEKDAY_NAMES[row.key.weekday],
            row.availability,
            row.entry.notes,
        ]
        for col_idx, value in enumerate(row_data, start=1):
            ws.cell(row=row_idx, column=col_idx, value=value)

    notes_row = len(rows) + 3
    ws.cell(row=notes_row, column=1, value="Month notes").font = Font(bold=True)
    ws.cell(row=notes_row, column=2, value=state.month_notes)

    ws.column_dimensions["C"].width = 28
    ws.column_dimensions["D"].width = 40


def write_listing_workbook(state: MonthState, output_path: Path) -> Path:
    """Create the listing workbook at output_path and return the path."""
    wb = Workbook()
    ws = wb.active
    ws.title = f"{state.year}-{state.month + 1:02d}"
    write_listing_sheet(ws, state)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(output_path)
    return output_path
