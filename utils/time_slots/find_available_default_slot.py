from models.availability.time_slot import TimeSlot
from utils.time_slots.generate_default_slot_candidates import (
    generate_default_slot_candidates
)
from utils.time_slots.slots_overlap import slots_overlap

FALLBACK_SLOT_START = "20:00"
FALLBACK_SLOT_END = "21:00"


def find_available_default_slot(existing_slots: list[TimeSlot]) -> TimeSlot:
    """
    Find a sensible default for a new slot on a day.

    Args:
        existing_slots: The slots already set on the day

    Returns:
        The first hourly candidate between 07:00 and 20:00 that does not
        overlap any existing slot. When every candidate is taken the
        20:00-21:00 slot is returned as is, even if it overlaps too.
    """
    for candidate in generate_default_slot_candidates():
        has_overlap = any(
            slots_overlap(candidate, existing_slot)
            for existing_slot in existing_slots
        )
        if not has_overlap:
            return candidate

    return TimeSlot(start=FALLBACK_SLOT_START, end=FALLBACK_SLOT_END)
