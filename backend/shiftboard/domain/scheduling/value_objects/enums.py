"""Domain enums for weekly shift scheduling."""

from enum import IntEnum

from ...shared.exceptions import InvalidArgumentError


def _require_int(field_name: str, value: object, valid_range: str) -> int:
    # bool is an int subclass; True must not silently become slot 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            field_name,
            value,
            f"Invalid {field_name}: {value!r} (expected an integer in {valid_range})",
        )
    return value


class TimeSlot(IntEnum):
    """One of the three fixed daily shift intervals."""

    MORNING = 0
    AFTERNOON = 1
    EVENING = 2

    @classmethod
    def from_value(cls, value: object) -> "TimeSlot":
        """Build a time slot from its raw integer code (0-2)."""
        code = _require_int("timeSlot", value, "0-2")
        try:
            return cls(code)
        except ValueError:
            raise InvalidArgumentError(
                "timeSlot", value, f"Invalid timeSlot: {value} (valid range is 0-2)"
            ) from None

    @property
    def start_hour(self) -> int:
        return _SLOT_HOURS[self][0]

    @property
    def end_hour(self) -> int:
        return _SLOT_HOURS[self][1]

    @property
    def time_range(self) -> str:
        """Canonical human-readable range, e.g. ``"14:00–17:00"``."""
        return f"{self.start_hour:02d}:00\u2013{self.end_hour:02d}:00"

    def __str__(self) -> str:
        return self.time_range


_SLOT_HOURS = {
    TimeSlot.MORNING: (9, 12),
    TimeSlot.AFTERNOON: (14, 17),
    TimeSlot.EVENING: (18, 21),
}


class DayOfWeek(IntEnum):
    """ISO day of week, Monday is 1."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: object) -> "DayOfWeek":
        """Build a day of week from its raw integer code (1-7)."""
        code = _require_int("dayOfWeek", value, "1-7")
        try:
            return cls(code)
        except ValueError:
            raise InvalidArgumentError(
                "dayOfWeek", value, f"Invalid dayOfWeek: {value} (valid range is 1-7)"
            ) from None

    def __str__(self) -> str:
        return self.name
