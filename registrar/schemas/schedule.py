# registrar/schemas/schedule.py
import re
from typing import Literal
from pydantic import field_validator
from registrar.schemas.base import APIModel

DayName = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
_HHMM = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")

class ScheduleCreate(APIModel):
    day_of_week: DayName
    start_time: str
    end_time: str
    location: str

    @field_validator("start_time", "end_time")
    @classmethod
    def _hhmm(cls, v: str) -> str:
        if not _HHMM.match(v):
            raise ValueError("expected HH:MM")
        return v

    @field_validator("end_time")
    @classmethod
    def _check_time_order(cls, v: str, info):
        start = info.data.get("start_time")
        if start and v <= start:
            raise ValueError("end_time must be after start_time")
        return v

class Schedule(ScheduleCreate):
    id: int
    course_id: int
