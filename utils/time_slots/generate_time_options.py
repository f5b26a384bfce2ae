from utils.time_slots.generate_time_slots import generate_time_slots

EARLIEST_TIME_OPTION = "06:00"
LATEST_TIME_OPTION = "21:00"
TIME_OPTION_INTERVAL_MINUTES = 30


def generate_time_options() -> list[str]:
    """
    The start/end values a trainer can pick for a slot:
    06:00 through 21:00 every 30 minutes.
    """
    return generate_time_slots(
        EARLIEST_TIME_OPTION,
        LATEST_TIME_OPTION,
        TIME_OPTION_INTERVAL_MINUTES
    )
