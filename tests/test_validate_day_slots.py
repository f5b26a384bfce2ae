from models.availability.time_slot import TimeSlot
from utils.time_slots import is_valid_time_range, validate_day_slots


def test_consecutive_slots_are_valid():
    # Arrange
    slots = [
        TimeSlot(start="07:00", end="08:00"),
        TimeSlot(start="08:00", end="09:00"),
        TimeSlot(start="09:00", end="10:00"),
    ]

    # Act
    result = validate_day_slots(slots)

    # Assert
    assert result is True


def test_overlapping_slots_are_invalid():
    # Arrange
    slots = [
        TimeSlot(start="07:00", end="09:00"),
        TimeSlot(start="08:00", end="10:00"),
    ]

    # Act
    result = validate_day_slots(slots)

    # Assert
    assert result is False


def test_overlap_between_first_and_last_slot_is_found():
    # Arrange
    slots = [
        TimeSlot(start="07:00", end="08:00"),
        TimeSlot(start="10:00", end="11:00"),
        TimeSlot(start="12:00", end="13:00"),
        TimeSlot(start="07:30", end="07:45"),
    ]

    # Act
    result = validate_day_slots(slots)

    # Assert
    assert result is False


def test_empty_and_single_slot_days_are_valid():
    assert validate_day_slots([]) is True
    assert validate_day_slots([TimeSlot(start="09:00", end="17:00")]) is True


def test_time_range_must_start_before_it_ends():
    assert is_valid_time_range(TimeSlot(start="09:00", end="09:30")) is True
    assert is_valid_time_range(TimeSlot(start="09:30", end="09:30")) is False
    assert is_valid_time_range(TimeSlot(start="10:00", end="09:00")) is False
