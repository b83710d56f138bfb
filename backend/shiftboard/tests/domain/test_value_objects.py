"""
Unit tests for the scheduling value objects.

Covers TimeSlot and DayOfWeek construction from raw integer codes, their
rendering and their rejection of out-of-range input.
"""

import pytest

from shiftboard.domain.scheduling.value_objects import DayOfWeek, TimeSlot
from shiftboard.domain.shared.exceptions import ErrorType, InvalidArgumentError


class TestTimeSlot:
    """Test TimeSlot value object."""

    @pytest.mark.parametrize(
        "value,expected_range",
        [(0, "09:00–12:00"), (1, "14:00–17:00"), (2, "18:00–21:00")],
    )
    def test_valid_codes(self, value, expected_range):
        slot = TimeSlot.from_value(value)
        assert int(slot) == value
        assert slot.time_range == expected_range
        assert str(slot) == expected_range

    @pytest.mark.parametrize("value", [-1, 3, 4, 100, -100])
    def test_out_of_range_codes_fail(self, value):
        with pytest.raises(InvalidArgumentError, match="valid range is 0-2") as exc:
            TimeSlot.from_value(value)
        assert exc.value.field_name == "timeSlot"
        assert exc.value.value == value
        assert exc.value.error_type == ErrorType.INVALID_ARGUMENT

    @pytest.mark.parametrize("value", ["1", 1.0, None, True])
    def test_non_integer_codes_fail(self, value):
        with pytest.raises(InvalidArgumentError, match="expected an integer"):
            TimeSlot.from_value(value)

    def test_hours(self):
        assert TimeSlot.MORNING.start_hour == 9
        assert TimeSlot.MORNING.end_hour == 12
        assert TimeSlot.EVENING.start_hour == 18
        assert TimeSlot.EVENING.end_hour == 21

    def test_equality_is_by_value(self):
        assert TimeSlot.from_value(1) == TimeSlot.AFTERNOON
        assert TimeSlot.from_value(1) is TimeSlot.from_value(1)
        assert len({TimeSlot.from_value(2), TimeSlot.EVENING}) == 1

    def test_exactly_three_slots(self):
        assert [int(slot) for slot in TimeSlot] == [0, 1, 2]


class TestDayOfWeek:
    """Test DayOfWeek value object."""

    @pytest.mark.parametrize("value", range(1, 8))
    def test_valid_codes(self, value):
        day = DayOfWeek.of(value)
        assert int(day) == value

    def test_monday_is_one(self):
        assert DayOfWeek.of(1) is DayOfWeek.MONDAY
        assert DayOfWeek.of(7) is DayOfWeek.SUNDAY

    @pytest.mark.parametrize("value", [0, 8, -1, 42])
    def test_out_of_range_codes_fail(self, value):
        with pytest.raises(InvalidArgumentError, match="valid range is 1-7") as exc:
            DayOfWeek.of(value)
        assert exc.value.field_name == "dayOfWeek"
        assert "dayOfWeek" in exc.value.message

    @pytest.mark.parametrize("value", ["3", 2.5, None, False])
    def test_non_integer_codes_fail(self, value):
        with pytest.raises(InvalidArgumentError):
            DayOfWeek.of(value)

    def test_string_is_upper_case_name(self):
        assert str(DayOfWeek.MONDAY) == "MONDAY"
        assert str(DayOfWeek.of(5)) == "FRIDAY"
