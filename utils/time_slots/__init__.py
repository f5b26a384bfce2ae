from utils.time_slots.find_available_default_slot import find_available_default_slot
from utils.time_slots.generate_default_slot_candidates import generate_default_slot_candidates
from utils.time_slots.generate_time_options import generate_time_options
from utils.time_slots.generate_time_slots import generate_time_slots
from utils.time_slots.is_valid_time_range import is_valid_time_range
from utils.time_slots.slots_overlap import slots_overlap
from utils.time_slots.validate_day_slots import validate_day_slots


__all__ = [
    "find_available_default_slot",
    "generate_default_slot_candidates",
    "generate_time_options",
    "generate_time_slots",
    "is_valid_time_range",
    "slots_overlap",
    "validate_day_slots",
]
