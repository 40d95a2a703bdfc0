"""FastAPI dependencies for shared resources."""

from pathlib import Path

from fastapi import Depends, HTTPException, status

from api.models.responses import ErrorCodes
from core.config import DB_PATH
from core.database import SqliteKeyValueStore
from models.availability import DateKey
from services.store import MonthStateStore
from services.submission import AvailabilityServiceClient, get_service_client

_store: MonthStateStore | None = None


def get_db_path() -> Path:
    return DB_PATH


def get_store(db_path: Path = Depends(get_db_path)) -> MonthStateStore:
    """Get or create the process-wide month state store (lazy initialization)."""
    global _store
    if _store is None:
        _store = MonthStateStore(SqliteKeyValueStore(db_path))
    return _store


def get_client(
    store: MonthStateStore = Depends(get_store),
) -> AvailabilityServiceClient | None:
    """Remote service client, or None when no endpoint is configured."""
    return get_service_client(store.kv)


def parse_date_key(date_key: str) -> DateKey:
    """Path parameter -> DateKey, 400 when malformed."""
    try:
        return DateKey.parse(date_key)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Invalid date key",
                "code": ErrorCodes.INVALID_REQUEST,
                "details": [f"Expected format: YYYY-MM-DD, got '{date_key}'"],
            },
        )
