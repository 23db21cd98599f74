# registrar/schemas/moodle.py
from datetime import datetime
from typing import Optional
from pydantic import Field
from registrar.schemas.base import APIModel

class MoodleLinkCreate(APIModel):
    moodle_id: str = Field(min_length=1, max_length=64)

class MoodleLink(MoodleLinkCreate):
    id: int
    course_id: int
    last_synced: Optional[datetime] = None
