from sqlmodel import Session

from shiftboard.infrastructure.database.models import EmployeeRow, OrganizationRow


def seed_employee(
    session: Session,
    organization_id: int,
    employee_id: int,
    name: str = "Jane Doe",
    position: str | None = None,
) -> EmployeeRow:
    """Insert an employee with fixed ids, creating the organization if needed."""
    if session.get(OrganizationRow, organization_id) is None:
        session.add(OrganizationRow(id=organization_id, name=f"Org {organization_id}"))
        session.commit()

    employee = EmployeeRow(
        organization_id=organization_id, id=employee_id, name=name, position=position
    )
    session.add(employee)
    session.commit()
    session.refresh(employee)
    return employee
