def convert_minutes_to_time(total_minutes: int) -> str:
    """
    Convert minutes since midnight to a time string (HH:MM).

    Args:
        total_minutes: Minutes since midnight, between 0 and 1439

    Returns:
        Time string in HH:MM format
    """
    if not 0 <= total_minutes < 24 * 60:
        raise ValueError(f"{total_minutes} minutes is outside a single day")

    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"
