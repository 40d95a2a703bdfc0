"""Tests for the remote availability service client and month submission."""

import asyncio
import json
from datetime import datetime, timezone

import httpx

from core.config import STORAGE_KEY_ENDPOINT_URL
from models.availability import DateKey, TimeSlot
from services.submission import (
    AvailabilityServiceClient,
    SubmissionOutcome,
    build_submission_payload,
    count_available_days,
    get_service_client,
    reflect_remote_submission,
    refresh_employees,
    resolve_endpoint_url,
    set_endpoint_url,
    submit_month,
)

BASE_URL = "https://script.example.com/macros/s/abc/exec"
NOW = datetime(2025, 3, 31, 12, 0, tzinfo=timezone.utc)


def make_client(handler) -> AvailabilityServiceClient:
    return AvailabilityServiceClient(BASE_URL, transport=httpx.MockTransport(handler))


def fill_month(store):
    store.save_day(DateKey(2025, 3, 3), all_day=True)
    store.save_day(DateKey(2025, 3, 4), slot1=TimeSlot(480, 720), notes="mornings")
    store.save_day(DateKey(2025, 3, 5), notes="maybe")
    store.save_day(DateKey(2025, 4, 1), all_day=True)


# =============================================================================
# Endpoint configuration
# =============================================================================


def test_endpoint_resolution(kv, monkeypatch):
    import services.submission

    assert resolve_endpoint_url(kv) is None
    assert get_service_client(kv) is None

    monkeypatch.setattr(services.submission, "BUILTIN_ENDPOINT_URL", "https://builtin.example")
    assert resolve_endpoint_url(kv) == "https://builtin.example"

    set_endpoint_url(kv, f"  {BASE_URL} ")
    assert kv.get(STORAGE_KEY_ENDPOINT_URL) == BASE_URL
    assert resolve_endpoint_url(kv) == BASE_URL

    set_endpoint_url(kv, "")
    assert resolve_endpoint_url(kv) == "https://builtin.example"


# =============================================================================
# Payload
# =============================================================================


def test_payload_is_scoped_to_displayed_month(store, employee_name):
    fill_month(store)
    store.set_month_notes("Exams in week 2")
    payload = build_submission_payload(store.state, employee_name, NOW)

    assert payload["employeeName"] == employee_name
    assert (payload["year"], payload["month"]) == (2025, 3)
    assert payload["monthNotes"] == "Exams in week 2"
    assert list(payload["days"]) == ["2025-03-03", "2025-03-04", "2025-03-05"]
    assert payload["days"]["2025-03-04"]["slot1"] == {"start": 480, "end": 720}
    assert payload["submittedAt"] == "2025-03-31T12:00:00Z"


def test_note_only_days_are_not_counted(store):
    fill_month(store)
    assert count_available_days(store.state) == 2


# =============================================================================
# submit_month
# =============================================================================


def test_submit_remotely(store, employee_name):
    fill_month(store)
    store.set_employee_name(employee_name)
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, text="OK")

    result = asyncio.run(submit_month(store, make_client(handler), now=NOW))

    assert result.outcome is SubmissionOutcome.SUBMITTED_REMOTELY
    assert result.days_submitted == 2
    assert store.state.submitted

    (request,) = requests
    assert request.method == "POST"
    assert request.headers["content-type"].startswith("text/plain")
    body = json.loads(request.content)
    assert body["employeeName"] == employee_name
    assert "2025-04-01" not in body["days"]


def test_submit_without_endpoint_is_local_only(store, employee_name):
    fill_month(store)
    store.set_employee_name(employee_name)
    result = asyncio.run(submit_month(store, None))
    assert result.outcome is SubmissionOutcome.SUBMITTED_LOCALLY_ONLY
    assert result.missing == ["endpoint"]
    assert result.days_submitted == 2
    assert store.state.submitted


def test_submit_without_employee_is_local_only(store):
    def handler(request):
        raise AssertionError("nothing should be sent")

    result = asyncio.run(submit_month(store, make_client(handler)))
    assert result.outcome is SubmissionOutcome.SUBMITTED_LOCALLY_ONLY
    assert result.missing == ["employee"]
    assert store.state.submitted


def test_submit_failure_leaves_flag(store, employee_name):
    store.set_employee_name(employee_name)

    def handler(request):
        return httpx.Response(500, text="Script error")

    result = asyncio.run(submit_month(store, make_client(handler)))
    assert result.outcome is SubmissionOutcome.FAILED
    assert result.reason
    assert not store.state.submitted


def test_submit_transport_error(store, employee_name):
    store.set_employee_name(employee_name)

    def handler(request):
        raise httpx.ConnectError("connection refused")

    result = asyncio.run(submit_month(store, make_client(handler)))
    assert result.outcome is SubmissionOutcome.FAILED
    assert "connection refused" in result.reason


# =============================================================================
# Reads
# =============================================================================


def test_fetch_employees_follows_redirect():
    def handler(request):
        if request.url.host == "script.example.com":
            return httpx.Response(302, headers={"Location": "https://content.example.com/echo"})
        return httpx.Response(200, json={"employees": ["Sato", "Suzuki", "", 3]})

    employees = asyncio.run(make_client(handler).fetch_employees())
    assert employees == ["Sato", "Suzuki"]


def test_fetch_employees_degrades_to_empty():
    def not_json(request):
        return httpx.Response(200, text="<html>login</html>")

    def server_error(request):
        return httpx.Response(503)

    assert asyncio.run(make_client(not_json).fetch_employees()) == []
    assert asyncio.run(make_client(server_error).fetch_employees()) == []


def test_fetch_submission_query():
    seen = []

    def handler(request):
        seen.append(request.url)
        return httpx.Response(200, json={"days": {}})

    data = asyncio.run(make_client(handler).fetch_submission("Sato Hanako", 2025, 2))
    assert data == {"days": {}}
    params = seen[0].params
    assert params["employeeName"] == "Sato Hanako"
    assert params["year"] == "2025"
    assert params["month"] == "3"


def test_reflect_remote_submission(store, employee_name):
    store.set_employee_name(employee_name)
    store.save_day(DateKey(2025, 3, 20), all_day=True)
    store.save_day(DateKey(2025, 4, 2), all_day=True)

    def handler(request):
        return httpx.Response(
            200,
            json={
                "monthNotes": "Synced",
                "days": {"2025-3-7": {"allDay": False, "slot1": {"start": -1, "end": 900}}},
            },
        )

    assert asyncio.run(reflect_remote_submission(store, make_client(handler)))
    assert sorted(store.state.days) == ["2025-03-07", "2025-04-02"]
    assert store.state.days["2025-03-07"].slot1 == TimeSlot(None, 900)
    assert store.state.month_notes == "Synced"


def test_reflect_without_employee_or_data(store, employee_name):
    def empty(request):
        return httpx.Response(200, json={})

    assert not asyncio.run(reflect_remote_submission(store, make_client(empty)))
    store.set_employee_name(employee_name)
    assert not asyncio.run(reflect_remote_submission(store, make_client(empty)))
    assert not asyncio.run(reflect_remote_submission(store, None))


def test_refresh_employees_drops_unknown_selection(store):
    store.set_employee_name("Tanaka")

    def handler(request):
        return httpx.Response(200, json={"employees": ["Sato", "Suzuki"]})

    assert asyncio.run(refresh_employees(store, make_client(handler))) == ["Sato", "Suzuki"]
    assert store.state.employee_name == ""


def test_refresh_employees_keeps_known_selection(store):
    store.set_employee_name("Sato")

    def handler(request):
        return httpx.Response(200, json={"employees": ["Sato", "Suzuki"]})

    asyncio.run(refresh_employees(store, make_client(handler)))
    assert store.state.employee_name == "Sato"
    assert asyncio.run(refresh_employees(store, None)) == []
    assert store.state.employee_name == "Sato"
