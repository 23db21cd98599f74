# registrar/schemas/enrollment.py
from datetime import datetime
from typing import Literal, Optional
from pydantic import Field
from registrar.models.enrollment import EnrollmentStatus
from registrar.schemas.base import APIModel

StatusLiteral = Literal["registered", "waitlisted", "dropped"]

class EnrollmentCreate(APIModel):
    course_id: int = Field(gt=0)
    # advisory only; the admission policy decides
    status: Optional[Literal["registered", "waitlisted"]] = None

class EnrollmentStatusUpdate(APIModel):
    status: StatusLiteral

class Enrollment(APIModel):
    id: int
    student_id: int
    course_id: int
    status: EnrollmentStatus
    enrolled_at: Optional[datetime] = None
