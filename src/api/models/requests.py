"""Pydantic request models for API endpoints."""

from typing import Literal

from pydantic import BaseModel


class NavigateRequest(BaseModel):
    delta: Literal[-1, 1]


class MonthNotesRequest(BaseModel):
    month_notes: str = ""


class EmployeeRequest(BaseModel):
    employee_name: str = ""


class EndpointRequest(BaseModel):
    url: str = ""


class SlotInput(BaseModel):
    """Clock text as typed; '' or '--:--' leaves the bound unspecified."""

    slot1_start: str = ""
    slot1_end: str = ""
    slot2_start: str = ""
    slot2_end: str = ""


class DayEntryRequest(SlotInput):
    all_day: bool = False
    notes: str = ""


class CopyToDatesRequest(BaseModel):
    dates: list[int] = []
    dates_text: str | None = None  # e.g. "15, 16, 20"


class TimeInputRequest(BaseModel):
    text: str = ""
