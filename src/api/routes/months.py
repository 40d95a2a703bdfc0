"""Month-level endpoints: navigation, notes, submitter, calendar grid."""

from fastapi import APIRouter, Depends

from api.dependencies import get_client, get_store
from api.models.requests import (
    EmployeeRequest,
    EndpointRequest,
    MonthNotesRequest,
    NavigateRequest,
)
from api.models.responses import (
    CalendarCellResponse,
    CalendarResponse,
    ClearResponse,
    EmployeesResponse,
    MonthResponse,
    SyncResponse,
)
from services.calendar import describe_month, month_label
from services.store import MonthStateStore
from services.submission import (
    AvailabilityServiceClient,
    get_service_client,
    reflect_remote_submission,
    refresh_employees,
    set_endpoint_url,
)

router = APIRouter(prefix="/v1/month")


def month_response(store: MonthStateStore) -> MonthResponse:
    state = store.state
    return MonthResponse(
        year=state.year,
        month=state.month,
        label=month_label(state.year, state.month),
        month_notes=state.month_notes,
        submitted=state.submitted,
        employee_name=state.employee_name,
        entry_count=len(state.month_days()),
    )


@router.get("", response_model=MonthResponse)
async def get_month(store: MonthStateStore = Depends(get_store)):
    return month_response(store)


@router.post("/navigate", response_model=MonthResponse)
async def navigate_month(body: NavigateRequest, store: MonthStateStore = Depends(get_store)):
    store.navigate_month(body.delta)
    return month_response(store)


@router.put("/notes", response_model=MonthResponse)
async def set_month_notes(body: MonthNotesRequest, store: MonthStateStore = Depends(get_store)):
    store.set_month_notes(body.month_notes)
    return month_response(store)


@router.put("/employee", response_model=MonthResponse)
async def select_employee(body: EmployeeRequest, store: MonthStateStore = Depends(get_store)):
    store.set_employee_name(body.employee_name)
    return month_response(store)


@router.delete("/days", response_model=ClearResponse)
async def clear_month(store: MonthStateStore = Depends(get_store)):
    """Remove every entry of the displayed month and its note."""
    return ClearResponse(removed=store.clear_month())


@router.get("/calendar", response_model=CalendarResponse)
async def get_calendar(store: MonthStateStore = Depends(get_store)):
    state = store.state
    cells = [
        CalendarCellResponse(
            key=view.key,
            date=view.cell.date,
            belongs_to=view.cell.belongs_to.value,
            year=view.cell.year,
            month=view.cell.month,
            is_sunday=view.is_sunday,
            is_saturday=view.is_saturday,
            is_holiday=view.is_holiday,
            is_today=view.is_today,
            has_entry=view.has_entry,
            summary_lines=view.summary_lines,
        )
        for view in describe_month(state)
    ]
    return CalendarResponse(
        year=state.year, month=state.month, label=month_label(state.year, state.month), cells=cells
    )


@router.get("/employees", response_model=EmployeesResponse)
async def list_employees(
    store: MonthStateStore = Depends(get_store),
    client: AvailabilityServiceClient | None = Depends(get_client),
):
    employees = await refresh_employees(store, client)
    return EmployeesResponse(employees=employees, selected=store.state.employee_name)


@router.put("/endpoint", response_model=EmployeesResponse)
async def configure_endpoint(body: EndpointRequest, store: MonthStateStore = Depends(get_store)):
    """Store (or clear) the remote endpoint and reload the employee list."""
    set_endpoint_url(store.kv, body.url)
    employees = await refresh_employees(store, get_service_client(store.kv))
    return EmployeesResponse(employees=employees, selected=store.state.employee_name)


@router.post("/sync", response_model=SyncResponse)
async def sync_from_remote(
    store: MonthStateStore = Depends(get_store),
    client: AvailabilityServiceClient | None = Depends(get_client),
):
    """Replace the displayed month with what was submitted remotely, if anything."""
    return SyncResponse(applied=await reflect_remote_submission(store, client))
