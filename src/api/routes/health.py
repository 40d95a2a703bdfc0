"""Health check endpoint."""

import sqlite3
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_store
from api.models.responses import HealthResponse
from core.config import API_VERSION, STORAGE_KEY
from services.store import MonthStateStore
from services.submission import resolve_endpoint_url

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(store: MonthStateStore = Depends(get_store)):
    """
    Health check endpoint for monitoring.

    Returns 200 if storage is reachable, 503 otherwise.
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    endpoint_configured = resolve_endpoint_url(store.kv) is not None

    try:
        store.kv.get(STORAGE_KEY)
    except (sqlite3.Error, OSError) as e:
        return JSONResponse(
            status_code=503,
            content=HealthResponse(
                status="unhealthy",
                version=API_VERSION,
                storage_available=False,
                endpoint_configured=endpoint_configured,
                timestamp=timestamp,
                error=f"Storage unavailable: {e}",
            ).model_dump(),
        )

    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        storage_available=True,
        endpoint_configured=endpoint_configured,
        timestamp=timestamp,
    )
