"""
SQL scheduling store tests.

Tests cover:
- Employee lookup scoped to an organization
- Unique-insert semantics for shift assignments
- Found-and-delete semantics for removals
- Organization and employee registration
- Wrapping of unexpected database failures
"""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from shiftboard.domain.scheduling.value_objects import DayOfWeek, TimeSlot
from shiftboard.domain.shared.exceptions import NotFoundError, RepositoryError
from shiftboard.infrastructure.database.repositories import SqlSchedulingStore
from shiftboard.tests.utils import seed_employee


def test_get_employee(store: SqlSchedulingStore, session: Session):
    seed_employee(session, 1, 10, name="Alan Turing", position="Analyst")

    employee = store.get_employee(1, 10)

    assert employee is not None
    assert employee.name == "Alan Turing"
    assert employee.position == "Analyst"
    assert employee.organization_id == 1
    assert store.get_employee(1, 11) is None
    assert store.get_employee(2, 10) is None


def test_add_shift_is_unique(store: SqlSchedulingStore, session: Session):
    seed_employee(session, 1, 10)

    assert store.add_shift(1, 10, DayOfWeek.MONDAY, TimeSlot.MORNING) is True
    assert store.add_shift(1, 10, DayOfWeek.MONDAY, TimeSlot.MORNING) is False
    assert store.add_shift(1, 10, DayOfWeek.MONDAY, TimeSlot.AFTERNOON) is True
    assert len(store.get_shifts(1)) == 2


def test_remove_shift_reports_whether_anything_was_removed(
    store: SqlSchedulingStore, session: Session
):
    seed_employee(session, 1, 10)
    store.add_shift(1, 10, DayOfWeek.TUESDAY, TimeSlot.EVENING)

    assert store.remove_shift(1, 10, DayOfWeek.TUESDAY, TimeSlot.MORNING) is False
    assert store.remove_shift(1, 10, DayOfWeek.TUESDAY, TimeSlot.EVENING) is True
    assert store.remove_shift(1, 10, DayOfWeek.TUESDAY, TimeSlot.EVENING) is False
    assert store.get_shifts(1) == []


def test_get_shifts_carries_names_and_value_objects(
    store: SqlSchedulingStore, session: Session
):
    seed_employee(session, 1, 10, name="Alan Turing")
    store.add_shift(1, 10, DayOfWeek.SATURDAY, TimeSlot.AFTERNOON)

    [assignment] = store.get_shifts(1)

    assert assignment.day_of_week is DayOfWeek.SATURDAY
    assert assignment.time_slot is TimeSlot.AFTERNOON
    assert assignment.employee_name == "Alan Turing"
    assert assignment.key == (1, 10, DayOfWeek.SATURDAY, TimeSlot.AFTERNOON)


def test_get_shifts_of_unknown_organization_is_empty(store: SqlSchedulingStore):
    assert store.get_shifts(404) == []


def test_add_organization_and_employees(store: SqlSchedulingStore):
    organization = store.add_organization("Acme")
    other = store.add_organization("Globex")

    first = store.add_employee(organization.id, "Jane Doe", position="Cook")
    second = store.add_employee(organization.id, "John Roe", department_id=5)
    elsewhere = store.add_employee(other.id, "Max Mustermann")

    assert store.get_organization(organization.id).name == "Acme"
    assert (first.id, second.id) == (1, 2)
    # Employee ids are allocated per organization
    assert elsewhere.id == 1
    assert second.department_id == 5
    assert store.get_employee(organization.id, 2).name == "John Roe"


def test_add_employee_to_unknown_organization(store: SqlSchedulingStore):
    with pytest.raises(NotFoundError, match="Organization not found: 42"):
        store.add_employee(42, "Nobody")


def test_unexpected_database_error_is_wrapped():
    session = Mock(spec=Session)
    session.execute.side_effect = OperationalError("DELETE", {}, Exception("gone"))
    store = SqlSchedulingStore(session)

    with pytest.raises(RepositoryError) as exc:
        store.remove_shift(1, 1, DayOfWeek.MONDAY, TimeSlot.MORNING)

    assert exc.value.operation == "remove_shift"
    session.rollback.assert_called_once()
