from models.availability.time_slot import TimeSlot
from utils.datetime import convert_time_to_minutes


def slots_overlap(slot_a: TimeSlot, slot_b: TimeSlot) -> bool:
    """
    Check if two time slots overlap.

    Slots are half-open intervals, so back-to-back slots
    (slot_a.end == slot_b.start) do not overlap. A zero-length slot does
    not overlap itself or a slot it only touches, but does overlap a slot
    that strictly contains it.

    Args:
        slot_a: The first slot
        slot_b: The second slot

    Returns:
        True if the slots share at least one minute, False otherwise
    """
    a_start = convert_time_to_minutes(slot_a.start)
    a_end = convert_time_to_minutes(slot_a.end)
    b_start = convert_time_to_minutes(slot_b.start)
    b_end = convert_time_to_minutes(slot_b.end)

    return a_start < b_end and b_start < a_end
