from pydantic import BaseModel, Field


TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class TimeSlot(BaseModel):
    start: str = Field(pattern=TIME_PATTERN)  # HH:MM
    end: str = Field(pattern=TIME_PATTERN)  # HH:MM
