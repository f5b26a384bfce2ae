from models.availability.time_slot import TimeSlot
from utils.datetime import convert_time_to_minutes


def is_valid_time_range(slot: TimeSlot) -> bool:
    """Start time must be strictly before end time."""
    return convert_time_to_minutes(slot.start) < convert_time_to_minutes(slot.end)
