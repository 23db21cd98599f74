# registrar/schemas/course.py
from typing import Literal, Optional
from pydantic import Field
from registrar.schemas.base import APIModel

DeliveryModeName = Literal["in-person", "online", "hybrid"]

class CourseBase(APIModel):
    code: str = Field(min_length=1, max_length=32)
    title: str = Field(min_length=1, max_length=200)
    description: str
    credits: int = Field(ge=0)
    department_id: int
    instructor_id: Optional[int] = None
    capacity: int = Field(ge=0)
    delivery_mode: DeliveryModeName
    level: int = Field(ge=0)
    semester: str = Field(min_length=1, max_length=20)
    year: int

class CourseCreate(CourseBase):
    pass

class CourseUpdate(APIModel):
    title: Optional[str] = None
    description: Optional[str] = None
    credits: Optional[int] = Field(default=None, ge=0)
    instructor_id: Optional[int] = None
    capacity: Optional[int] = Field(default=None, ge=0)
    delivery_mode: Optional[DeliveryModeName] = None
    level: Optional[int] = Field(default=None, ge=0)
    semester: Optional[str] = None
    year: Optional[int] = None

class Course(CourseBase):
    id: int
    seats_taken: int = 0
