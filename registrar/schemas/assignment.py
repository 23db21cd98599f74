# registrar/schemas/assignment.py
from datetime import datetime
from typing import Optional
from pydantic import Field
from registrar.schemas.base import APIModel

class AssignmentCreate(APIModel):
    course_id: int
    title: str = Field(min_length=1, max_length=200)
    description: str
    due_date: datetime
    total_points: int = Field(gt=0)
    moodle_id: Optional[str] = None

class Assignment(AssignmentCreate):
    id: int
