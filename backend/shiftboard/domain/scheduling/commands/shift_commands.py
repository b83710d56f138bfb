"""Commands that add, list and remove recurring shift assignments."""

from shiftboard.core.observability import get_logger, record_command
from ..value_objects.enums import DayOfWeek, TimeSlot
from .base import Command, CommandResult

logger = get_logger(__name__)

EMPLOYEE_NOT_FOUND = "Employee not found"
ADD_CONFLICT = "Failed to add shift - slot might already be filled"
REMOVE_MISSING = "Failed to remove shift - shift might not exist"


class _EmployeeShiftCommand(Command):
    organization_id: int
    employee_id: int
    day_of_week: DayOfWeek
    time_slot: TimeSlot

    def _finish(self, result: CommandResult) -> CommandResult:
        record_command(self.name, result.status)
        logger.info(
            "Shift command executed",
            command=self.name,
            command_id=str(self.command_id),
            organization_id=self.organization_id,
            employee_id=self.employee_id,
            day_of_week=str(self.day_of_week),
            time_slot=self.time_slot.time_range,
            status=result.status,
            result_message=result.message,
        )
        return result


class AddShiftCommand(_EmployeeShiftCommand):
    """Schedule an employee for one weekly (day, slot) pair."""

    def execute(self) -> CommandResult:
        employee = self.store.get_employee(self.organization_id, self.employee_id)
        if employee is None:
            return self._finish(CommandResult.failed(EMPLOYEE_NOT_FOUND))

        added = self.store.add_shift(
            self.organization_id, self.employee_id, self.day_of_week, self.time_slot
        )
        if not added:
            return self._finish(CommandResult.failed(ADD_CONFLICT))

        return self._finish(
            CommandResult.success(
                "Shift added successfully",
                employee_name=employee.name,
                day_of_week=str(self.day_of_week),
                time_slot=self.time_slot.time_range,
            )
        )


class RemoveShiftCommand(_EmployeeShiftCommand):
    """Remove one weekly (day, slot) assignment of an employee.

    Removing an assignment that does not exist is reported as a failure.
    """

    def execute(self) -> CommandResult:
        employee = self.store.get_employee(self.organization_id, self.employee_id)
        if employee is None:
            return self._finish(CommandResult.failed(EMPLOYEE_NOT_FOUND))

        removed = self.store.remove_shift(
            self.organization_id, self.employee_id, self.day_of_week, self.time_slot
        )
        if not removed:
            return self._finish(CommandResult.failed(REMOVE_MISSING))

        return self._finish(
            CommandResult.success(
                "Shift removed successfully",
                employee_name=employee.name,
                day_of_week=str(self.day_of_week),
                time_slot=self.time_slot.time_range,
            )
        )


class GetShiftCommand(Command):
    """List every shift assignment of an organization."""

    organization_id: int

    def execute(self) -> CommandResult:
        shifts = self.store.get_shifts(self.organization_id)
        record_command(self.name, "success")
        logger.info(
            "Shift command executed",
            command=self.name,
            command_id=str(self.command_id),
            organization_id=self.organization_id,
            shift_count=len(shifts),
        )
        return CommandResult.success(
            "Shifts retrieved successfully",
            shifts=[shift.to_dict() for shift in shifts],
        )
