# registrar/models/assignment.py
from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, Integer, ForeignKey, DateTime
from registrar.db.base_class import Base

class Assignment(Base):
    __tablename__ = "assignments"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    course_id: Mapped[int] = mapped_column(ForeignKey("courses.id"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text())
    due_date: Mapped[datetime] = mapped_column(DateTime(timezone=True))
    total_points: Mapped[int] = mapped_column(Integer)
    moodle_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    course = relationship("Course")
