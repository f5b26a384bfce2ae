from utils.datetime.add_minutes_to_time_string import add_minutes_to_time_string
from utils.datetime.convert_minutes_to_time import convert_minutes_to_time
from utils.datetime.convert_time_to_minutes import convert_time_to_minutes

__all__ = [
    "add_minutes_to_time_string",
    "convert_minutes_to_time",
    "convert_time_to_minutes",
]
