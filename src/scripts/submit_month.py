#!/usr/bin/env python3
"""
Submit the stored month's availability to the remote sheet.

Uses the configured endpoint (stored setting or SHIFT_APP_ENDPOINT_URL) and
the selected employee. Without either, the submission is recorded locally.

Usage:
    uv run python src/scripts/submit_month.py
    uv run python src/scripts/submit_month.py --employee "Sato" --endpoint https://...
"""

import argparse
import asyncio
import sys
import traceback
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.database import SqliteKeyValueStore
from services.calendar import month_label
from services.reports import format_listing
from services.store import MonthStateStore
from services.submission import (
    SubmissionOutcome,
    get_service_client,
    set_endpoint_url,
    submit_month,
)


async def main(employee: str | None = None, endpoint: str | None = None):
    """Main entry point."""
    try:
        kv = SqliteKeyValueStore()
        if endpoint is not None:
            set_endpoint_url(kv, endpoint)

        store = MonthStateStore(kv)
        if employee is not None:
            store.set_employee_name(employee)

        state = store.state
        print(f"Submitting {month_label(state.year, state.month)}")
        print(format_listing(state))
        print()

        result = await submit_month(store, get_service_client(kv))

        if result.outcome is SubmissionOutcome.SUBMITTED_REMOTELY:
            print(f"Submitted {result.days_submitted} day(s) to the sheet.")
        elif result.outcome is SubmissionOutcome.SUBMITTED_LOCALLY_ONLY:
            print(f"Recorded locally only ({result.days_submitted} day(s)).")
            print(f"Missing settings: {', '.join(result.missing)}")
            print("Set an endpoint with --endpoint and pick yourself with --employee.")
        else:
            print(f"Submission failed: {result.reason}")
            print("Check the endpoint URL and the sheet configuration.")
            sys.exit(1)

    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        raise


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Submit stored shift availability")
    parser.add_argument("--employee", help="Employee name to submit as (saved for next time)")
    parser.add_argument("--endpoint", help="Remote sheet URL (saved; pass '' to clear)")
    args = parser.parse_args()

    asyncio.run(main(args.employee, args.endpoint))
