"""API Pydantic models."""

from .requests import (
    CopyToDatesRequest,
    DayEntryRequest,
    EmployeeRequest,
    EndpointRequest,
    MonthNotesRequest,
    NavigateRequest,
    SlotInput,
    TimeInputRequest,
)
from .responses import (
    CalendarCellResponse,
    CalendarResponse,
    ClearResponse,
    CopyResponse,
    DayEntryResponse,
    EmployeesResponse,
    ErrorCodes,
    ErrorResponse,
    HealthResponse,
    ListingResponse,
    MonthResponse,
    ProjectionModel,
    SubmissionResponse,
    SyncResponse,
    TimeInputResponse,
    TimeOptionsResponse,
    TimeSlotModel,
)

__all__ = [
    "CalendarCellResponse",
    "CalendarResponse",
    "ClearResponse",
    "CopyResponse",
    "CopyToDatesRequest",
    "DayEntryRequest",
    "DayEntryResponse",
    "EmployeeRequest",
    "EmployeesResponse",
    "EndpointRequest",
    "ErrorCodes",
    "ErrorResponse",
    "HealthResponse",
    "ListingResponse",
    "MonthNotesRequest",
    "MonthResponse",
    "NavigateRequest",
    "ProjectionModel",
    "SlotInput",
    "SubmissionResponse",
    "SyncResponse",
    "TimeInputRequest",
    "TimeInputResponse",
    "TimeOptionsResponse",
    "TimeSlotModel",
]
