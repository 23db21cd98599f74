# registrar/schemas/event.py
from datetime import datetime
from typing import Literal, Optional
from pydantic import model_validator
from registrar.schemas.base import APIModel

EventType = Literal["deadline", "exam", "holiday", "other"]

class EventCreate(APIModel):
    title: str
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    type: EventType
    course_id: Optional[int] = None

    @model_validator(mode="after")
    def _check_range(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self

class Event(EventCreate):
    id: int
