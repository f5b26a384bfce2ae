from models.availability.time_slot import TimeSlot
from utils.datetime import add_minutes_to_time_string
from utils.time_slots.generate_time_slots import generate_time_slots

FIRST_CANDIDATE_START = "07:00"
LAST_CANDIDATE_START = "19:00"
CANDIDATE_DURATION_MINUTES = 60


def generate_default_slot_candidates() -> list[TimeSlot]:
    """
    One-hour candidate slots starting every hour from 07:00 to 19:00
    (13 candidates, the last one being 19:00-20:00).
    """
    start_times = generate_time_slots(
        FIRST_CANDIDATE_START,
        LAST_CANDIDATE_START,
        CANDIDATE_DURATION_MINUTES
    )

    return [
        TimeSlot(
            start=start_time,
            end=add_minutes_to_time_string(
                start_time, CANDIDATE_DURATION_MINUTES)
        )
        for start_time in start_times
    ]
