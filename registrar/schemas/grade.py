# registrar/schemas/grade.py
from datetime import datetime
from typing import Optional
from pydantic import Field
from registrar.schemas.base import APIModel

class GradeCreate(APIModel):
    assignment_id: int
    student_id: int
    score: int = Field(ge=0)
    feedback: Optional[str] = None
    submitted_at: Optional[datetime] = None

class GradeUpdate(APIModel):
    score: int = Field(ge=0)
    feedback: Optional[str] = None

class Grade(GradeCreate):
    id: int
    graded_at: Optional[datetime] = None
