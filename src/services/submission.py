"""
Remote availability service (sheet web app) and month submission.

Reads degrade to empty results on any failure. Submission reports which
path was taken: remote, local-only (missing configuration) or failed.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from urllib.parse import urlencode

import httpx

from core.config import BUILTIN_ENDPOINT_URL, STORAGE_KEY_ENDPOINT_URL
from models.availability import MonthState
from services.store import PERSIST_ERRORS, MonthStateStore

logger = logging.getLogger(__name__)


# =============================================================================
# ENDPOINT CONFIGURATION
# =============================================================================


def resolve_endpoint_url(kv) -> str | None:
    """User-configured endpoint first, then the built-in one."""
    try:
        stored = kv.get(STORAGE_KEY_ENDPOINT_URL)
    except PERSIST_ERRORS as e:
        logger.warning("Could not read endpoint setting: %s", e)
        stored = None
    if stored and stored.strip():
        return stored.strip()
    return BUILTIN_ENDPOINT_URL or None


def set_endpoint_url(kv, url: str | None) -> None:
    url = (url or "").strip()
    if url:
        kv.set(STORAGE_KEY_ENDPOINT_URL, url)
    else:
        kv.remove(STORAGE_KEY_ENDPOINT_URL)


# =============================================================================
# CLIENT
# =============================================================================


class AvailabilityServiceClient:
    """Async client for the remote availability sheet."""

    def __init__(self, base_url: str, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url.strip()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        # The sheet web app answers with a redirect to the actual content
        return httpx.AsyncClient(transport=self._transport, follow_redirects=True)

    def _url_with_query(self, params: dict) -> str:
        separator = "&" if "?" in self.base_url else "?"
        return f"{self.base_url}{separator}{urlencode(params)}"

    async def _get_json(self, url: str):
        async with self._client() as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()

    async def fetch_employees(self) -> list[str]:
        """Employee names the sheet knows about; [] on any failure."""
        try:
            data = await self._get_json(self.base_url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Could not fetch employee list: %s", e)
            return []
        employees = data.get("employees") if isinstance(data, dict) else None
        if not isinstance(employees, list):
            return []
        return [str(name) for name in employees if isinstance(name, str) and name.strip()]

    async def fetch_submission(self, employee_name: str, year: int, month0: int) -> dict | None:
        """Previously submitted month for an employee; None on any failure."""
        url = self._url_with_query(
            {"employeeName": employee_name, "year": year, "month": month0 + 1}
        )
        try:
            data = await self._get_json(url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Could not fetch submission for %s: %s", employee_name, e)
            return None
        return data if isinstance(data, dict) else None

    async def submit(self, payload: dict) -> None:
        """
        Post a submission. The response body is not read.

        Raises:
            httpx.HTTPError: on transport failure or an error status
        """
        async with self._client() as client:
            response = await client.post(
                self.base_url,
                content=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
                headers={"Content-Type": "text/plain; charset=utf-8"},
            )
            response.raise_for_status()


def get_service_client(kv) -> AvailabilityServiceClient | None:
    url = resolve_endpoint_url(kv)
    return AvailabilityServiceClient(url) if url else None


# =============================================================================
# SUBMISSION
# =============================================================================


class SubmissionOutcome(str, Enum):
    SUBMITTED_REMOTELY = "submitted_remotely"
    SUBMITTED_LOCALLY_ONLY = "submitted_locally_only"
    FAILED = "failed"


@dataclass
class SubmissionResult:
    outcome: SubmissionOutcome
    days_submitted: int = 0
    missing: list[str] = field(default_factory=list)  # "endpoint", "employee"
    reason: str | None = None


def count_available_days(state: MonthState) -> int:
    """Displayed-month days with all-day or timed availability; note-only days aren't counted."""
    return sum(1 for entry in state.month_days().values() if entry.has_availability())


def build_submission_payload(
    state: MonthState, employee_name: str, now: datetime | None = None
) -> dict:
    now = now or datetime.now(timezone.utc)
    return {
        "employeeName": employee_name,
        "year": state.year,
        "month": state.month + 1,
        "monthNotes": state.month_notes,
        "days": {key: entry.to_dict() for key, entry in state.month_days().items()},
        "submittedAt": now.isoformat().replace("+00:00", "Z"),
    }


async def submit_month(
    store: MonthStateStore,
    client: AvailabilityServiceClient | None,
    now: datetime | None = None,
) -> SubmissionResult:
    """
    Submit the stored availability.

    Without an endpoint or a selected employee the submission is recorded
    locally only. A remote failure leaves the submitted flag untouched.
    """
    store.persist()
    employee_name = store.state.employee_name.strip()

    missing = []
    if client is None:
        missing.append("endpoint")
    if not employee_name:
        missing.append("employee")
    if missing:
        store.mark_submitted()
        return SubmissionResult(
            outcome=SubmissionOutcome.SUBMITTED_LOCALLY_ONLY,
            days_submitted=count_available_days(store.state),
            missing=missing,
        )

    payload = build_submission_payload(store.state, employee_name, now)
    try:
        await client.submit(payload)
    except httpx.HTTPError as e:
        logger.warning("Submission for %s failed: %s", employee_name, e)
        return SubmissionResult(outcome=SubmissionOutcome.FAILED, reason=str(e) or type(e).__name__)

    store.mark_submitted()
    return SubmissionResult(
        outcome=SubmissionOutcome.SUBMITTED_REMOTELY,
        days_submitted=count_available_days(store.state),
    )


async def reflect_remote_submission(
    store: MonthStateStore, client: AvailabilityServiceClient | None
) -> bool:
    """
    Pull the employee's submitted month into the store.

    Returns True when remote data was applied.
    """
    employee_name = store.state.employee_name.strip()
    if client is None or not employee_name:
        return False

    data = await client.fetch_submission(employee_name, store.state.year, store.state.month)
    if not data or not isinstance(data.get("days"), dict):
        return False

    month_notes = data.get("monthNotes")
    store.replace_month(data["days"], None if month_notes is None else str(month_notes))
    return True


async def refresh_employees(
    store: MonthStateStore, client: AvailabilityServiceClient | None
) -> list[str]:
    """Fetch the employee list and drop a selection that's no longer on it."""
    if client is None:
        return []
    employees = await client.fetch_employees()
    if store.state.employee_name and store.state.employee_name not in employees:
        store.set_employee_name("")
    return employees
