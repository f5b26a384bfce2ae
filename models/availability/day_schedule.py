from typing import Literal, get_args
from pydantic import BaseModel
from .time_slot import TimeSlot


WeekDay = Literal[
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
]

DAYS_OF_WEEK: list[str] = list(get_args(WeekDay))


class DaySchedule(BaseModel):
    enabled: bool = False
    slots: list[TimeSlot] = []


WeeklySchedule = dict[WeekDay, DaySchedule]
