"""Pydantic response models for API endpoints."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str  # "healthy" or "unhealthy"
    version: str
    storage_available: bool
    endpoint_configured: bool
    timestamp: str  # ISO 8601 UTC
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class TimeSlotModel(BaseModel):
    start: str  # "HH:MM" or "" when unspecified
    end: str


class ProjectionModel(BaseModel):
    visible: bool
    left_pct: float
    width_pct: float


class DayEntryResponse(BaseModel):
    key: str
    weekday: str
    has_entry: bool
    all_day: bool = False
    slot1: TimeSlotModel | None = None
    slot2: TimeSlotModel | None = None
    notes: str = ""
    summary_lines: list[str] = []
    chart: list[ProjectionModel] = []
    errors: list[str] = []  # clock fields that were rejected and not stored


class MonthResponse(BaseModel):
    year: int
    month: int  # 0-based
    label: str
    month_notes: str
    submitted: bool
    employee_name: str
    entry_count: int


class CalendarCellResponse(BaseModel):
    key: str
    date: int
    belongs_to: str  # current | previous | next
    year: int
    month: int  # 0-based
    is_sunday: bool
    is_saturday: bool
    is_holiday: bool
    is_today: bool
    has_entry: bool
    summary_lines: list[str]


class CalendarResponse(BaseModel):
    year: int
    month: int
    label: str
    cells: list[CalendarCellResponse]


class CopyResponse(BaseModel):
    copied: int
    message: str


class ClearResponse(BaseModel):
    removed: int


class TimeInputResponse(BaseModel):
    formatted: str
    valid: bool
    minutes: int | None = None
    error: str | None = None


class TimeOptionsResponse(BaseModel):
    hours: list[int | None]
    minutes: list[int]


class EmployeesResponse(BaseModel):
    employees: list[str]
    selected: str


class SyncResponse(BaseModel):
    applied: bool


class ListingResponse(BaseModel):
    month_notes: str
    lines: list[str]
    text: str


class SubmissionResponse(BaseModel):
    outcome: str
    days_submitted: int
    missing: list[str] = []
    reason: str | None = None
    submitted: bool
