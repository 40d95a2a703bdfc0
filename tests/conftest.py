"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date
from pathlib import Path

import pytest
from faker import Faker

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.database import SqliteKeyValueStore  # noqa: E402
from models.availability import DateKey, DayEntry, TimeSlot  # noqa: E402
from services.store import MonthStateStore  # noqa: E402

# March 2025: the 1st is a Saturday, 31 days
TODAY = date(2025, 3, 10)


@pytest.fixture(autouse=True)
def no_builtin_endpoint(monkeypatch):
    """Keep a developer's SHIFT_APP_ENDPOINT_URL out of the tests."""
    import services.submission

    monkeypatch.setattr(services.submission, "BUILTIN_ENDPOINT_URL", "")


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db" / "test.db"


@pytest.fixture
def kv(db_path):
    return SqliteKeyValueStore(db_path)


@pytest.fixture
def store(kv):
    """Store for March 2025 backed by a temporary database."""
    return MonthStateStore(kv, today=TODAY)


@pytest.fixture
def fake():
    Faker.seed(20250310)
    return Faker()


@pytest.fixture
def employee_name(fake):
    return fake.name()


@pytest.fixture
def timed_entry():
    """8:00-12:00 plus an open-ended evening slot."""
    return DayEntry.timed(TimeSlot(480, 720), TimeSlot(1080, None), notes="Can stay late")


@pytest.fixture
def monday_key():
    return DateKey(2025, 3, 10)
