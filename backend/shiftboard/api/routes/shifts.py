"""
Shift Scheduling API Routes.

Translates requests into shift commands: decodes the opaque client id,
builds the day/slot value objects, executes the command and maps its result
to a status code.
"""

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from shiftboard.api.deps import CodecDep, StoreDep
from shiftboard.core.codec import MAX_ID
from shiftboard.domain.scheduling.commands import (
    AddShiftCommand,
    Command,
    GetShiftCommand,
    RemoveShiftCommand,
)
from shiftboard.domain.scheduling.value_objects import DayOfWeek, TimeSlot
from shiftboard.domain.shared.exceptions import InvalidArgumentError, NotFoundError

router = APIRouter(tags=["shifts"])


def _failed(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"status": "failed", "message": message},
    )


def _run(command: Command, success_code: int) -> JSONResponse:
    result = command.execute()
    return JSONResponse(
        status_code=success_code if result.succeeded else status.HTTP_400_BAD_REQUEST,
        content=result.to_response(),
    )


@router.post(
    "/addShift",
    summary="Add a recurring shift",
    description="Assign an employee to a weekly day/time-slot pair.",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid input, unknown employee or slot taken"}},
)
def add_shift(
    store: StoreDep,
    codec: CodecDep,
    client_id: str = Query(alias="cid"),
    employee_id: int = Query(alias="employeeId", ge=-MAX_ID - 1, le=MAX_ID),
    day_of_week: int = Query(alias="dayOfWeek", description="1-7, Monday to Sunday"),
    time_slot: int = Query(alias="timeSlot", description="0: 9-12, 1: 14-17, 2: 18-21"),
) -> JSONResponse:
    try:
        command = AddShiftCommand(
            store=store,
            organization_id=codec.decode_id(client_id),
            employee_id=employee_id,
            day_of_week=DayOfWeek.of(day_of_week),
            time_slot=TimeSlot.from_value(time_slot),
        )
        return _run(command, status.HTTP_201_CREATED)
    except (InvalidArgumentError, NotFoundError) as e:
        return _failed(e.message)


@router.get(
    "/getShift",
    summary="List shifts",
    description="Get every shift assignment of an organization.",
)
def get_shift(
    store: StoreDep,
    codec: CodecDep,
    client_id: str = Query(alias="cid"),
) -> JSONResponse:
    try:
        command = GetShiftCommand(store=store, organization_id=codec.decode_id(client_id))
        return _run(command, status.HTTP_200_OK)
    except (InvalidArgumentError, NotFoundError) as e:
        return _failed(e.message)


@router.delete(
    "/removeShift",
    summary="Remove a recurring shift",
    description="Remove an employee's assignment to a weekly day/time-slot pair.",
    responses={400: {"description": "Invalid input, unknown employee or no such shift"}},
)
def remove_shift(
    store: StoreDep,
    codec: CodecDep,
    client_id: str = Query(alias="cid"),
    employee_id: int = Query(alias="employeeId", ge=-MAX_ID - 1, le=MAX_ID),
    day_of_week: int = Query(alias="dayOfWeek", description="1-7, Monday to Sunday"),
    time_slot: int = Query(alias="timeSlot", description="0: 9-12, 1: 14-17, 2: 18-21"),
) -> JSONResponse:
    try:
        command = RemoveShiftCommand(
            store=store,
            organization_id=codec.decode_id(client_id),
            employee_id=employee_id,
            day_of_week=DayOfWeek.of(day_of_week),
            time_slot=TimeSlot.from_value(time_slot),
        )
        return _run(command, status.HTTP_200_OK)
    except (InvalidArgumentError, NotFoundError) as e:
        return _failed(e.message)
