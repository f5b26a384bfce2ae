from typing import Literal
from pydantic import BaseModel
from .day_schedule import WeeklySchedule


class Notification(BaseModel):
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class ScheduleEditResult(BaseModel):
    result: Literal["applied", "rejected"]
    schedule: WeeklySchedule
    notification: Notification | None = None
