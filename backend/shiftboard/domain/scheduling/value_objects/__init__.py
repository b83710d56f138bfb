"""Scheduling value objects."""

from .enums import DayOfWeek, TimeSlot

__all__ = ["DayOfWeek", "TimeSlot"]
