"""
Login and registration routes.

Both flows are delegated to the external employee registry; nothing here is
stored locally.
"""

from datetime import date

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from shiftboard.api.deps import RegistryDep
from shiftboard.core.observability import get_logger
from shiftboard.domain.shared.exceptions import RegistryError

logger = get_logger(__name__)

router = APIRouter(tags=["login"])


def _reply(status_code: int, result: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"status": result, "message": message}
    )


@router.post(
    "/login",
    summary="Log in an employee",
    description="Validate an employee id and name against the employee registry.",
    responses={
        401: {"description": "Employee name does not match"},
        404: {"description": "Employee ID does not exist"},
        502: {"description": "Employee registry unavailable"},
    },
)
def login(
    registry: RegistryDep,
    employee_id: str = Query(alias="eid"),
    name: str = Query(),
) -> JSONResponse:
    try:
        employee = registry.get_employee_info(employee_id)
    except RegistryError as e:
        logger.error("Login failed", employee_id=employee_id, error=e.message)
        return _reply(
            status.HTTP_502_BAD_GATEWAY,
            "failed",
            "An error occurred while logging in",
        )

    if not employee:
        return _reply(status.HTTP_404_NOT_FOUND, "failed", "Employee ID does not exist")

    fetched_name = employee.get("name")
    if name != fetched_name:
        logger.info("Login rejected", employee_id=employee_id, reason="name_mismatch")
        return _reply(
            status.HTTP_401_UNAUTHORIZED, "failed", "Employee name does not match"
        )

    logger.info("Login succeeded", employee_id=employee_id)
    return _reply(status.HTTP_200_OK, "success", f"Logged in as {fetched_name}")


@router.post(
    "/register",
    summary="Register an employee",
    description="Register a new employee with the employee registry.",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Registry rejected the employee"}},
)
def register_employee(
    registry: RegistryDep,
    first_name: str = Query(alias="firstName", min_length=1),
    last_name: str = Query(alias="lastName", min_length=1),
    department_id: int = Query(alias="departmentId"),
    hire_date: date = Query(alias="hireDate", description="yyyy-MM-dd"),
    position: str = Query(min_length=1),
) -> JSONResponse:
    full_name = f"{first_name} {last_name}"
    try:
        body = registry.register_employee(
            full_name, department_id, hire_date.isoformat(), position
        )
    except RegistryError as e:
        logger.error("Registration failed", name=full_name, error=e.message)
        return _reply(
            status.HTTP_502_BAD_GATEWAY,
            "failed",
            "An error occurred while registering the employee",
        )

    if body.get("status") != 200:
        return _reply(
            status.HTTP_400_BAD_REQUEST, "failed", "Failed to register new employee"
        )

    logger.info("Employee registered", name=full_name, department_id=department_id)
    return _reply(status.HTTP_201_CREATED, "success", str(body.get("message", "")))
