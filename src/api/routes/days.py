"""Day-level endpoints: read, save, clear, copy, and time input helpers."""

from fastapi import APIRouter, Depends

from api.dependencies import get_store, parse_date_key
from api.models.requests import CopyToDatesRequest, DayEntryRequest, SlotInput, TimeInputRequest
from api.models.responses import (
    CopyResponse,
    DayEntryResponse,
    ProjectionModel,
    TimeInputResponse,
    TimeOptionsResponse,
    TimeSlotModel,
)
from core.config import WEEKDAY_NAMES
from core.timeparse import (
    auto_insert_colon,
    format_minutes_for_input,
    hour_choices,
    minute_choices,
    normalize_digits_and_colon,
    parse_clock_string,
)
from core.validation import parse_slot_input
from models.availability import DateKey, DayEntry, TimeSlot
from services.propagation import parse_target_dates
from services.store import MonthStateStore
from services.timeline import SlotProjection, project, project_entry

router = APIRouter(prefix="/v1")


def _slot_model(slot: TimeSlot | None) -> TimeSlotModel | None:
    if slot is None:
        return None
    return TimeSlotModel(
        start=format_minutes_for_input(slot.start), end=format_minutes_for_input(slot.end)
    )


def _projection_model(projection: SlotProjection) -> ProjectionModel:
    return ProjectionModel(
        visible=projection.visible,
        left_pct=projection.left_pct,
        width_pct=projection.width_pct,
    )


def day_response(key: DateKey, entry: DayEntry | None) -> DayEntryResponse:
    response = DayEntryResponse(
        key=str(key),
        weekday=WEEKDAY_NAMES[key.weekday],
        has_entry=entry is not None,
        chart=[_projection_model(p) for p in project_entry(entry)],
    )
    if entry is not None:
        response.all_day = entry.all_day
        response.slot1 = _slot_model(entry.slot1)
        response.slot2 = _slot_model(entry.slot2)
        response.notes = entry.notes
        response.summary_lines = entry.summary_lines()
    return response


@router.get("/days/{date_key}", response_model=DayEntryResponse)
async def get_day(
    key: DateKey = Depends(parse_date_key), store: MonthStateStore = Depends(get_store)
):
    return day_response(key, store.get_day(key))


@router.put("/days/{date_key}", response_model=DayEntryResponse)
async def save_day(
    body: DayEntryRequest,
    key: DateKey = Depends(parse_date_key),
    store: MonthStateStore = Depends(get_store),
):
    """
    Save a day. Slots are ignored when all_day is set.

    Malformed or out-of-range clock text is never stored: the bound is left
    out, the rest of the day is saved, and the field errors come back in
    `errors`.
    """
    slot1 = slot2 = None
    errors = []
    if not body.all_day:
        slot1, errors1 = parse_slot_input(body.slot1_start, body.slot1_end, "slot1")
        slot2, errors2 = parse_slot_input(body.slot2_start, body.slot2_end, "slot2")
        errors = errors1 + errors2

    entry = store.save_day(
        key, all_day=body.all_day, slot1=slot1, slot2=slot2, notes=body.notes
    )
    response = day_response(key, entry)
    response.errors = errors
    return response


@router.post("/days/{date_key}/all-day", response_model=DayEntryResponse)
async def mark_all_day(
    key: DateKey = Depends(parse_date_key), store: MonthStateStore = Depends(get_store)
):
    return day_response(key, store.set_all_day(key))


@router.delete("/days/{date_key}", response_model=DayEntryResponse)
async def clear_day(
    key: DateKey = Depends(parse_date_key), store: MonthStateStore = Depends(get_store)
):
    store.clear_day(key)
    return day_response(key, None)


def _copy_response(count: int, source_exists: bool) -> CopyResponse:
    if not source_exists:
        return CopyResponse(copied=0, message="The source date has no entry to copy")
    if count == 0:
        return CopyResponse(copied=0, message="No valid target dates in this month")
    return CopyResponse(copied=count, message=f"Copied to {count} day(s)")


@router.post("/days/{date_key}/copy", response_model=CopyResponse)
async def copy_to_dates(
    body: CopyToDatesRequest,
    key: DateKey = Depends(parse_date_key),
    store: MonthStateStore = Depends(get_store),
):
    """Copy the day's entry onto listed dates of the displayed month."""
    dates = list(body.dates) + parse_target_dates(body.dates_text)
    count = store.copy_to_dates(key, dates)
    return _copy_response(count, store.get_day(key) is not None)


@router.post("/days/{date_key}/copy-weekday", response_model=CopyResponse)
async def copy_to_same_weekday(
    key: DateKey = Depends(parse_date_key), store: MonthStateStore = Depends(get_store)
):
    """Copy the day's entry onto every same-weekday date of its month."""
    count = store.copy_to_same_weekday(key)
    return _copy_response(count, store.get_day(key) is not None)


@router.post("/timeline/preview", response_model=list[ProjectionModel])
async def preview_timeline(body: SlotInput):
    """
    Live chart for slot fields being edited.

    Text that doesn't parse is shown as an open bound, as while typing.
    """
    bounds = [
        parse_clock_string(normalize_digits_and_colon(text)).minutes
        for text in (body.slot1_start, body.slot1_end, body.slot2_start, body.slot2_end)
    ]
    slots = [TimeSlot.from_bounds(bounds[0], bounds[1]), TimeSlot.from_bounds(bounds[2], bounds[3])]
    return [_projection_model(project(slot)) for slot in slots]


@router.post("/time-input", response_model=TimeInputResponse)
async def format_time_input(body: TimeInputRequest):
    """Normalize typed text ('０９３０' -> '09:30') and report whether it parses."""
    formatted = auto_insert_colon(body.text)
    parsed = parse_clock_string(formatted)
    return TimeInputResponse(
        formatted=formatted, valid=parsed.valid, minutes=parsed.minutes, error=parsed.error
    )


@router.get("/time-options", response_model=TimeOptionsResponse)
async def time_options():
    return TimeOptionsResponse(hours=hour_choices(), minutes=minute_choices())
