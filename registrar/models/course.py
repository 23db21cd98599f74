# registrar/models/course.py
from enum import Enum
from typing import Optional
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Text, Integer, ForeignKey, CheckConstraint
from registrar.db.base_class import Base

class DeliveryMode(str, Enum):
    in_person = "in-person"
    online = "online"
    hybrid = "hybrid"

class Course(Base):
    __tablename__ = "courses"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    code: Mapped[str] = mapped_column(String(32), unique=True, index=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[str] = mapped_column(Text())
    credits: Mapped[int] = mapped_column(Integer)
    department_id: Mapped[int] = mapped_column(ForeignKey("departments.id"))
    instructor_id: Mapped[Optional[int]] = mapped_column(ForeignKey("users.id"), nullable=True)
    capacity: Mapped[int] = mapped_column(Integer)
    # registered enrollments; moved only by crud.enrollment
    seats_taken: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    delivery_mode: Mapped[str] = mapped_column(String(16))
    level: Mapped[int] = mapped_column(Integer)
    semester: Mapped[str] = mapped_column(String(20))
    year: Mapped[int] = mapped_column(Integer)

    department = relationship("Department", back_populates="courses")
    instructor = relationship("User")
    schedules = relationship("Schedule", back_populates="course", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("capacity >= 0", name="capacity_non_negative"),
        CheckConstraint(
            "delivery_mode IN (%s)" % ",".join(f"'{m.value}'" for m in DeliveryMode), name="delivery_mode"
        ),
    )
