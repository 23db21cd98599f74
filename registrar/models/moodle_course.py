# registrar/models/moodle_course.py
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, ForeignKey, DateTime
from registrar.db.base_class import Base

class MoodleCourse(Base):
    __tablename__ = "moodle_courses"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("courses.id"), unique=True)
    moodle_id: Mapped[str] = mapped_column(String(64), unique=True)
    last_synced: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
