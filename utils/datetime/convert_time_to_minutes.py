def convert_time_to_minutes(time_str: str) -> int:
    """
    Convert a time string (HH:MM) to minutes since midnight.
    """
    hours, minutes = map(int, time_str.split(":"))
    return hours * 60 + minutes
