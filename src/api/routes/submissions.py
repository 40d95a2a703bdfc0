"""Submission endpoints: confirmation listing and submit."""

import logging
import time
from pathlib import Path

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_client, get_db_path, get_store
from api.logging import RequestLog, log_request
from api.models.responses import ListingResponse, SubmissionResponse
from services.reports import format_listing, submission_listing
from services.store import MonthStateStore
from services.submission import AvailabilityServiceClient, SubmissionOutcome, submit_month

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/submissions")


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@router.get("/listing", response_model=ListingResponse)
async def get_listing(store: MonthStateStore = Depends(get_store)):
    state = store.state
    return ListingResponse(
        month_notes=state.month_notes,
        lines=[row.line() for row in submission_listing(state)],
        text=format_listing(state),
    )


@router.post("", response_model=SubmissionResponse)
async def submit(
    request: Request,
    store: MonthStateStore = Depends(get_store),
    client: AvailabilityServiceClient | None = Depends(get_client),
    db_path: Path = Depends(get_db_path),
):
    """
    Submit the displayed month.

    Always 200: the outcome field says whether it went to the remote
    sheet, was recorded locally only, or failed.
    """
    start_time = time.time()
    state = store.state
    request_log = RequestLog(
        endpoint="/v1/submissions",
        method="POST",
        client_ip=get_client_ip(request),
        employee_name=state.employee_name or None,
        target_month=f"{state.year:04d}-{state.month + 1:02d}",
    )

    try:
        result = await submit_month(store, client)

        request_log.status_code = 200
        request_log.outcome = result.outcome.value
        request_log.days_submitted = result.days_submitted
        for setting in result.missing:
            request_log.details.append(("missing_setting", setting))
        if result.outcome is SubmissionOutcome.FAILED:
            request_log.error_message = result.reason
            request_log.details.append(("remote_error", result.reason or ""))

        return SubmissionResponse(
            outcome=result.outcome.value,
            days_submitted=result.days_submitted,
            missing=result.missing,
            reason=result.reason,
            submitted=store.state.submitted,
        )

    except Exception as e:
        request_log.status_code = 500
        request_log.error_message = str(e)
        raise

    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        # Always log the request
        try:
            log_request(request_log, db_path)
        except Exception as e:
            # Don't fail the request if logging fails
            logger.warning("Could not write request log: %s", e)
