"""Shift scheduling commands."""

from .base import FAILED, SUCCESS, Command, CommandResult
from .shift_commands import AddShiftCommand, GetShiftCommand, RemoveShiftCommand

__all__ = [
    "FAILED",
    "SUCCESS",
    "AddShiftCommand",
    "Command",
    "CommandResult",
    "GetShiftCommand",
    "RemoveShiftCommand",
]
