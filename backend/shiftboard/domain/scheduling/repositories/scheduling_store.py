"""
Scheduling Store Interface

Defines the contract for the persistence operations the shift commands need.
Implementations must be safe to call from concurrent request threads.
"""

from abc import ABC, abstractmethod

from ..entities import Employee, Organization, ShiftAssignment
from ..value_objects.enums import DayOfWeek, TimeSlot


class SchedulingStore(ABC):
    """
    Abstract store for organizations, employees and shift assignments.

    The command layer checks employee existence and mutates in two separate
    calls, so uniqueness on add and found-and-delete on remove must each be
    atomic inside the store.
    """

    @abstractmethod
    def get_employee(self, organization_id: int, employee_id: int) -> Employee | None:
        """
        Look up an employee within an organization.

        Returns:
            Employee or None if the organization has no such employee

        Raises:
            RepositoryError: If retrieval fails
        """
        pass

    @abstractmethod
    def add_shift(
        self,
        organization_id: int,
        employee_id: int,
        day_of_week: DayOfWeek,
        time_slot: TimeSlot,
    ) -> bool:
        """
        Insert a shift assignment.

        Returns:
            True if inserted, False if the assignment already exists

        Raises:
            RepositoryError: If the insert fails for any other reason
        """
        pass

    @abstractmethod
    def remove_shift(
        self,
        organization_id: int,
        employee_id: int,
        day_of_week: DayOfWeek,
        time_slot: TimeSlot,
    ) -> bool:
        """
        Delete a shift assignment.

        Returns:
            True if an assignment was removed, False if none existed

        Raises:
            RepositoryError: If the delete fails
        """
        pass

    @abstractmethod
    def get_shifts(self, organization_id: int) -> list[ShiftAssignment]:
        """
        List every shift assignment of an organization.

        Ordered by day, then slot, then employee id. Empty when the
        organization has no assignments.
        """
        pass

    @abstractmethod
    def get_organization(self, organization_id: int) -> Organization | None:
        pass

    @abstractmethod
    def add_organization(self, name: str) -> Organization:
        pass

    @abstractmethod
    def add_employee(
        self,
        organization_id: int,
        name: str,
        position: str | None = None,
        department_id: int | None = None,
    ) -> Employee:
        """
        Register an employee under an organization.

        Raises:
            NotFoundError: If the organization does not exist
            RepositoryError: If the insert fails
        """
        pass
