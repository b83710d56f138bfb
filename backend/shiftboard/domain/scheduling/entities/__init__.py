"""Scheduling domain entities."""

from .employee import Employee, Organization
from .shift_assignment import ShiftAssignment

__all__ = ["Employee", "Organization", "ShiftAssignment"]
