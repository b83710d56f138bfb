"""
Command abstraction for the shift scheduling domain.

A command is constructed with every input it needs, including the store it
talks to, and exposes a single blocking ``execute()``. Negative outcomes are
returned as a failed ``CommandResult``; only unexpected store faults escape.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from ..repositories.scheduling_store import SchedulingStore

SUCCESS = "success"
FAILED = "failed"


class CommandResult(BaseModel):
    """Uniform result of a command execution."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["success", "failed"]
    message: str
    employee_name: str | None = Field(default=None, alias="employeeName")
    day_of_week: str | None = Field(default=None, alias="dayOfWeek")
    time_slot: str | None = Field(default=None, alias="timeSlot")
    shifts: list[dict[str, Any]] | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == SUCCESS

    @classmethod
    def success(cls, message: str, **fields: Any) -> "CommandResult":
        return cls(status=SUCCESS, message=message, **fields)

    @classmethod
    def failed(cls, message: str) -> "CommandResult":
        return cls(status=FAILED, message=message)

    def to_response(self) -> dict[str, Any]:
        """Wire mapping with camelCase keys; unset echo fields are dropped."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Command(BaseModel, ABC):
    """Base class for all shift commands."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    store: SchedulingStore = Field(exclude=True, repr=False)
    command_id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def execute(self) -> CommandResult:
        """Run the command against the store and return its result."""
        pass
