"""Recurring weekly shift assignment entity."""

from dataclasses import dataclass, field
from typing import Any

from ..value_objects.enums import DayOfWeek, TimeSlot


@dataclass(frozen=True)
class ShiftAssignment:
    """An employee scheduled to work one recurring weekly slot.

    At most one assignment exists per (organization, employee, day, slot);
    the store enforces it.
    """

    organization_id: int
    employee_id: int
    day_of_week: DayOfWeek
    time_slot: TimeSlot
    employee_name: str | None = field(default=None, compare=False)

    @property
    def key(self) -> tuple[int, int, DayOfWeek, TimeSlot]:
        return (self.organization_id, self.employee_id, self.day_of_week, self.time_slot)

    def to_dict(self) -> dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "dayOfWeek": str(self.day_of_week),
            "timeSlot": self.time_slot.time_range,
        }
