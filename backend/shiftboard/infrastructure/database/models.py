"""
SQLModel table definitions for the shift scheduling store.

Day of week and time slot are stored as their integer codes. The unique
constraint on shift_assignments is what makes concurrent adds of the same
assignment safe.
"""

from datetime import datetime, timezone

from sqlalchemy import ForeignKeyConstraint, UniqueConstraint
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampedModel(SQLModel):
    """Base model with timestamp fields."""

    created_at: datetime = Field(default_factory=_utcnow)


class OrganizationRow(TimestampedModel, table=True):
    __tablename__ = "organizations"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)


class EmployeeRow(TimestampedModel, table=True):
    """Employee table; the primary key is composite (organization, employee)."""

    __tablename__ = "employees"

    organization_id: int = Field(
        foreign_key="organizations.id", primary_key=True, ondelete="CASCADE"
    )
    id: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})
    name: str = Field(max_length=200)
    position: str | None = Field(default=None, max_length=100)
    department_id: int | None = None


class ShiftAssignmentRow(TimestampedModel, table=True):
    __tablename__ = "shift_assignments"
    __table_args__ = (
        UniqueConstraint(
            "organization_id",
            "employee_id",
            "day_of_week",
            "time_slot",
            name="uq_shift_assignment",
        ),
        ForeignKeyConstraint(
            ["organization_id", "employee_id"],
            ["employees.organization_id", "employees.id"],
            ondelete="CASCADE",
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    organization_id: int = Field(index=True)
    employee_id: int
    day_of_week: int
    time_slot: int
