#!/usr/bin/env python3
"""
Export the stored month's availability listing to an Excel workbook.

Usage:
    uv run python src/scripts/export_month.py
    uv run python src/scripts/export_month.py --output ~/Desktop/availability.xlsx
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import OUTPUT_DIR
from core.database import SqliteKeyValueStore
from services.reports import write_listing_workbook
from services.store import MonthStateStore


def default_output_path(year: int, month0: int, employee_name: str) -> Path:
    """output/availability/availability_2025_03[_name].xlsx"""
    name = f"availability_{year}_{month0 + 1:02d}"
    if employee_name:
        name += "_" + "".join(c if c.isalnum() else "_" for c in employee_name)
    return OUTPUT_DIR / "availability" / f"{name}.xlsx"


def main(output: str | None = None):
    """Main entry point."""
    state = MonthStateStore(SqliteKeyValueStore()).snapshot()
    if output:
        output_path = Path(output).expanduser()
    else:
        output_path = default_output_path(state.year, state.month, state.employee_name)

    write_listing_workbook(state, output_path)
    print(f"Saved availability listing to: {output_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Export stored availability to Excel")
    parser.add_argument("--output", help="Output .xlsx path. Defaults to output/availability/.")
    args = parser.parse_args()

    main(args.output)
