from utils.datetime.convert_minutes_to_time import convert_minutes_to_time
from utils.datetime.convert_time_to_minutes import convert_time_to_minutes


def add_minutes_to_time_string(time_str: str, minutes: int) -> str:
    """
    Add minutes to a time string and return the result as a time string.
    The result must stay within the same day.

    Args:
        time_str: Time in HH:MM format
        minutes: Number of minutes to add

    Returns:
        Time string in HH:MM format
    """
    return convert_minutes_to_time(convert_time_to_minutes(time_str) + minutes)
