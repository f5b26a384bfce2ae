from typing import Literal
from pydantic import BaseModel, Field
from .day_schedule import WeekDay, WeeklySchedule
from .time_slot import TIME_PATTERN, TimeSlot


class ValidateDayPayload(BaseModel):
    slots: list[TimeSlot]


class DefaultSlotPayload(BaseModel):
    existing_slots: list[TimeSlot] = []


class AddSlotPayload(BaseModel):
    schedule: WeeklySchedule
    day: WeekDay


class UpdateSlotPayload(BaseModel):
    schedule: WeeklySchedule
    day: WeekDay
    slot_index: int
    field: Literal["start", "end"]
    value: str = Field(pattern=TIME_PATTERN)


class RemoveSlotPayload(BaseModel):
    schedule: WeeklySchedule
    day: WeekDay
    slot_index: int


class SetDayEnabledPayload(BaseModel):
    schedule: WeeklySchedule
    day: WeekDay
    enabled: bool


class QuickSchedulePayload(BaseModel):
    schedule: WeeklySchedule
    preset: Literal["weekdays", "weekends", "clear"]
