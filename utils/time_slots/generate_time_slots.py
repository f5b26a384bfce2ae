from utils.datetime import convert_minutes_to_time, convert_time_to_minutes


def generate_time_slots(
    start_time: str,
    end_time: str,
    min_interval: int
) -> list[str]:
    """
    Generate a list of times between start_time and end_time (inclusive)
    with given interval.

    Args:
        start_time: Start time in HH:MM format
        end_time: End time in HH:MM format
        min_interval: Interval in minutes (15, 30 or 60)

    Returns:
        List of time strings in HH:MM format
    """
    valid_min_intervals = [15, 30, 60]
    if min_interval not in valid_min_intervals:
        raise ValueError("min_interval must be 15, 30 or 60")

    start_minutes = convert_time_to_minutes(start_time)
    end_minutes = convert_time_to_minutes(end_time)

    return [
        convert_minutes_to_time(minutes)
        for minutes in range(start_minutes, end_minutes + 1, min_interval)
    ]
