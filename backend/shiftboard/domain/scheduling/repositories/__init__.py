"""Scheduling repository interfaces."""

from .scheduling_store import SchedulingStore

__all__ = ["SchedulingStore"]
