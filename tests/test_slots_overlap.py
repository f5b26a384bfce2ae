from models.availability.time_slot import TimeSlot
from utils.time_slots import slots_overlap


def test_back_to_back_slots_do_not_overlap():
    # Arrange
    morning = TimeSlot(start="09:00", end="10:00")
    late_morning = TimeSlot(start="10:00", end="11:00")

    # Act
    result = slots_overlap(morning, late_morning)

    # Assert
    assert result is False


def test_partially_shared_slots_overlap():
    # Arrange
    slot_a = TimeSlot(start="09:00", end="10:00")
    slot_b = TimeSlot(start="09:30", end="10:30")

    # Act
    result = slots_overlap(slot_a, slot_b)

    # Assert
    assert result is True


def test_overlap_is_symmetric():
    pairs = [
        (TimeSlot(start="09:00", end="10:00"), TimeSlot(start="09:30", end="10:30")),
        (TimeSlot(start="09:00", end="10:00"), TimeSlot(start="10:00", end="11:00")),
        (TimeSlot(start="07:00", end="12:00"), TimeSlot(start="08:00", end="09:00")),
        (TimeSlot(start="06:00", end="06:30"), TimeSlot(start="20:00", end="21:00")),
    ]

    for slot_a, slot_b in pairs:
        assert slots_overlap(slot_a, slot_b) == slots_overlap(slot_b, slot_a)


def test_slot_overlaps_itself():
    # Arrange
    slot = TimeSlot(start="14:00", end="15:30")

    # Act
    result = slots_overlap(slot, slot)

    # Assert
    assert result is True


def test_zero_length_slot_overlaps_only_a_slot_containing_it():
    # Arrange
    empty = TimeSlot(start="09:00", end="09:00")
    surrounding = TimeSlot(start="08:00", end="10:00")
    ending_at_nine = TimeSlot(start="08:00", end="09:00")
    starting_at_nine = TimeSlot(start="09:00", end="10:00")

    # Act / Assert
    assert slots_overlap(empty, empty) is False
    assert slots_overlap(empty, ending_at_nine) is False
    assert slots_overlap(empty, starting_at_nine) is False
    assert slots_overlap(empty, surrounding) is True


def test_contained_slot_overlaps():
    # Arrange
    outer = TimeSlot(start="07:00", end="12:00")
    inner = TimeSlot(start="08:00", end="09:00")

    # Act
    result = slots_overlap(outer, inner)

    # Assert
    assert result is True
