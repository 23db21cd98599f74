# registrar/crud/course.py
from dataclasses import dataclass
from typing import List, Optional
from sqlalchemy import select, or_
from sqlalchemy.orm import Session
from registrar.crud.base import CRUDBase
from registrar.models.course import Course
from registrar.models.schedule import Schedule
from registrar.models.moodle_course import MoodleCourse
from registrar.schemas.course import CourseCreate, CourseUpdate
from registrar.schemas.schedule import ScheduleCreate

@dataclass
class CourseFilters:
    department_id: Optional[int] = None
    level: Optional[int] = None
    credits: Optional[int] = None
    delivery_mode: Optional[str] = None
    search: Optional[str] = None
    semester: Optional[str] = None
    year: Optional[int] = None
    instructor_id: Optional[int] = None

class CRUDCourse(CRUDBase[Course, CourseCreate, CourseUpdate]):
    def get_by_code(self, db: Session, code: str) -> Course | None:
        return db.scalar(select(Course).where(Course.code == code))

    def list(self, db: Session, filters: CourseFilters | None = None, *, skip: int = 0, limit: int = 100) -> List[Course]:
        stmt = select(Course)
        f = filters or CourseFilters()
        conds = []
        if f.department_id is not None:
            conds.append(Course.department_id == f.department_id)
        if f.level is not None:
            conds.append(Course.level == f.level)
        if f.credits is not None:
            conds.append(Course.credits == f.credits)
        if f.delivery_mode:
            conds.append(Course.delivery_mode == f.delivery_mode)
        if f.semester:
            conds.append(Course.semester == f.semester)
        if f.year is not None:
            conds.append(Course.year == f.year)
        if f.instructor_id is not None:
            conds.append(Course.instructor_id == f.instructor_id)
        if f.search:
            like = f"%{f.search.strip()}%"
            conds.append(or_(Course.code.ilike(like), Course.title.ilike(like), Course.description.ilike(like)))
        if conds:
            stmt = stmt.where(*conds)
        return list(db.scalars(stmt.order_by(Course.code).offset(skip).limit(limit)).all())

    def create(self, db: Session, obj_in: CourseCreate, extra=None) -> Course:
        return super().create(db, obj_in, extra={"seats_taken": 0, **(extra or {})})

    def schedules(self, db: Session, course_id: int) -> List[Schedule]:
        stmt = select(Schedule).where(Schedule.course_id == course_id).order_by(Schedule.id)
        return list(db.scalars(stmt).all())

    def add_schedule(self, db: Session, course_id: int, obj_in: ScheduleCreate) -> Schedule:
        sch = Schedule(course_id=course_id, **obj_in.model_dump())
        db.add(sch); db.commit(); db.refresh(sch)
        return sch

    def moodle_link(self, db: Session, course_id: int) -> MoodleCourse | None:
        return db.scalar(select(MoodleCourse).where(MoodleCourse.course_id == course_id))

    def link_moodle(self, db: Session, course_id: int, moodle_id: str) -> MoodleCourse:
        link = self.moodle_link(db, course_id) or MoodleCourse(course_id=course_id)
        link.moodle_id = moodle_id
        db.add(link); db.commit(); db.refresh(link)
        return link

course_crud = CRUDCourse(Course)
