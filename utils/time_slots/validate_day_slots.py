from models.availability.time_slot import TimeSlot
from utils.time_slots.slots_overlap import slots_overlap


def validate_day_slots(slots: list[TimeSlot]) -> bool:
    """
    Check that no two slots of a single day overlap.

    Args:
        slots: The slots of one day

    Returns:
        False on the first overlapping pair, True if none overlap
    """
    for i in range(len(slots)):
        for j in range(i + 1, len(slots)):
            if slots_overlap(slots[i], slots[j]):
                return False
    return True
