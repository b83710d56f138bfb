"""
Organization and employee roster routes.

Organizations and their employees live in the local store so that shift
commands can verify employees; organization ids are only ever exposed in
encoded form.
"""

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from shiftboard.api.deps import CodecDep, RegistryDep, StoreDep
from shiftboard.core.codec import MAX_ID
from shiftboard.core.observability import get_logger
from shiftboard.domain.shared.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    RegistryError,
)

logger = get_logger(__name__)

router = APIRouter(tags=["organizations"])


def _failed(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"status": "failed", "message": message},
    )


@router.get(
    "/getOrgInfo",
    summary="Get organization info",
    description="Fetch organization information from the employee registry.",
)
def get_organization_info(
    registry: RegistryDep,
    client_id: str = Query(alias="cid"),
) -> JSONResponse:
    try:
        info = registry.get_organization_info(client_id)
    except RegistryError as e:
        return _failed(e.message)
    return JSONResponse(status_code=status.HTTP_200_OK, content=info)


@router.post(
    "/addOrganization",
    summary="Create an organization",
    status_code=status.HTTP_201_CREATED,
)
def add_organization(
    store: StoreDep,
    codec: CodecDep,
    name: str = Query(min_length=1, max_length=200),
) -> JSONResponse:
    organization = store.add_organization(name)
    logger.info("Organization created", organization_id=organization.id)
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "status": "success",
            "message": "Organization created",
            "cid": codec.encode(organization.id),
            "name": organization.name,
        },
    )


@router.post(
    "/addEmployee",
    summary="Add an employee to an organization",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid client id or unknown organization"}},
)
def add_employee(
    store: StoreDep,
    codec: CodecDep,
    client_id: str = Query(alias="cid"),
    name: str = Query(min_length=1, max_length=200),
    position: str | None = Query(None, max_length=100),
    department_id: int | None = Query(
        None, alias="departmentId", ge=-MAX_ID - 1, le=MAX_ID
    ),
) -> JSONResponse:
    try:
        organization_id = codec.decode_id(client_id)
        employee = store.add_employee(organization_id, name, position, department_id)
    except (InvalidArgumentError, NotFoundError) as e:
        return _failed(e.message)

    logger.info(
        "Employee added", organization_id=organization_id, employee_id=employee.id
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "status": "success",
            "message": "Employee added",
            "employeeId": employee.id,
            "employeeName": employee.name,
        },
    )
