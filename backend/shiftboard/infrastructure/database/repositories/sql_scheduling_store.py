"""
SQL implementation of the scheduling store.

One store wraps one SQLModel session; the API layer opens a session per
request, so concurrent requests never share session state. Conflicting
inserts are detected by the ``uq_shift_assignment`` constraint and removals
are a single DELETE whose row count decides the outcome.
"""

from sqlalchemy import delete, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from shiftboard.core.observability import get_logger
from shiftboard.domain.scheduling.entities import (
    Employee,
    Organization,
    ShiftAssignment,
)
from shiftboard.domain.scheduling.repositories import SchedulingStore
from shiftboard.domain.scheduling.value_objects import DayOfWeek, TimeSlot
from shiftboard.domain.shared.exceptions import NotFoundError, RepositoryError
from shiftboard.infrastructure.database.models import (
    EmployeeRow,
    OrganizationRow,
    ShiftAssignmentRow,
)

logger = get_logger(__name__)


def _to_employee(row: EmployeeRow) -> Employee:
    return Employee(
        id=row.id,
        organization_id=row.organization_id,
        name=row.name,
        position=row.position,
        department_id=row.department_id,
    )


class SqlSchedulingStore(SchedulingStore):
    """Scheduling store backed by a relational database."""

    def __init__(self, session: Session):
        self.session = session

    def get_employee(self, organization_id: int, employee_id: int) -> Employee | None:
        try:
            row = self.session.get(
                EmployeeRow, {"organization_id": organization_id, "id": employee_id}
            )
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Database error during get_employee: {str(e)}", "get_employee"
            ) from e
        return _to_employee(row) if row else None

    def add_shift(
        self,
        organization_id: int,
        employee_id: int,
        day_of_week: DayOfWeek,
        time_slot: TimeSlot,
    ) -> bool:
        row = ShiftAssignmentRow(
            organization_id=organization_id,
            employee_id=employee_id,
            day_of_week=int(day_of_week),
            time_slot=int(time_slot),
        )
        try:
            self.session.add(row)
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.info(
                "Shift insert rejected",
                organization_id=organization_id,
                employee_id=employee_id,
                day_of_week=int(day_of_week),
                time_slot=int(time_slot),
            )
            return False
        except SQLAlchemyError as e:
            self.session.rollback()
            raise RepositoryError(
                f"Database error during add_shift: {str(e)}", "add_shift"
            ) from e
        return True

    def remove_shift(
        self,
        organization_id: int,
        employee_id: int,
        day_of_week: DayOfWeek,
        time_slot: TimeSlot,
    ) -> bool:
        statement = delete(ShiftAssignmentRow).where(
            ShiftAssignmentRow.organization_id == organization_id,
            ShiftAssignmentRow.employee_id == employee_id,
            ShiftAssignmentRow.day_of_week == int(day_of_week),
            ShiftAssignmentRow.time_slot == int(time_slot),
        )
        try:
            result = self.session.execute(statement)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise RepositoryError(
                f"Database error during remove_shift: {str(e)}", "remove_shift"
            ) from e
        return result.rowcount > 0

    def get_shifts(self, organization_id: int) -> list[ShiftAssignment]:
        statement = (
            select(ShiftAssignmentRow, EmployeeRow.name)
            .join(
                EmployeeRow,
                (EmployeeRow.organization_id == ShiftAssignmentRow.organization_id)
                & (EmployeeRow.id == ShiftAssignmentRow.employee_id),
            )
            .where(ShiftAssignmentRow.organization_id == organization_id)
            .order_by(
                ShiftAssignmentRow.day_of_week,
                ShiftAssignmentRow.time_slot,
                ShiftAssignmentRow.employee_id,
            )
        )
        try:
            rows = self.session.exec(statement).all()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Database error during get_shifts: {str(e)}", "get_shifts"
            ) from e

        return [
            ShiftAssignment(
                organization_id=row.organization_id,
                employee_id=row.employee_id,
                day_of_week=DayOfWeek(row.day_of_week),
                time_slot=TimeSlot(row.time_slot),
                employee_name=name,
            )
            for row, name in rows
        ]

    def get_organization(self, organization_id: int) -> Organization | None:
        try:
            row = self.session.get(OrganizationRow, organization_id)
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Database error during get_organization: {str(e)}", "get_organization"
            ) from e
        return Organization(id=row.id, name=row.name) if row else None

    def add_organization(self, name: str) -> Organization:
        row = OrganizationRow(name=name)
        try:
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise RepositoryError(
                f"Database error during add_organization: {str(e)}", "add_organization"
            ) from e
        return Organization(id=row.id, name=row.name)

    def add_employee(
        self,
        organization_id: int,
        name: str,
        position: str | None = None,
        department_id: int | None = None,
    ) -> Employee:
        if self.get_organization(organization_id) is None:
            raise NotFoundError("Organization", organization_id)

        try:
            next_id = (
                self.session.exec(
                    select(func.coalesce(func.max(EmployeeRow.id), 0)).where(
                        EmployeeRow.organization_id == organization_id
                    )
                ).one()
                + 1
            )
            row = EmployeeRow(
                organization_id=organization_id,
                id=next_id,
                name=name,
                position=position,
                department_id=department_id,
            )
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        except SQLAlchemyError as e:
            # A concurrent registration may have taken next_id first
            self.session.rollback()
            raise RepositoryError(
                f"Database error during add_employee: {str(e)}", "add_employee"
            ) from e
        return _to_employee(row)
