# registrar/crud/coursework.py
from datetime import datetime, timezone
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session
from registrar.crud.base import CRUDBase
from registrar.models.assignment import Assignment
from registrar.models.enrollment import Enrollment, EnrollmentStatus
from registrar.models.grade import Grade
from registrar.schemas.assignment import AssignmentCreate
from registrar.schemas.grade import GradeCreate, GradeUpdate

class CRUDAssignment(CRUDBase[Assignment, AssignmentCreate, AssignmentCreate]):
    def for_course(self, db: Session, course_id: int) -> List[Assignment]:
        stmt = select(Assignment).where(Assignment.course_id == course_id).order_by(Assignment.due_date)
        return list(db.scalars(stmt).all())

    def for_student(self, db: Session, student_id: int) -> List[Assignment]:
        """Assignments of every course the student currently holds a seat in."""
        stmt = (
            select(Assignment)
            .join(Enrollment, Enrollment.course_id == Assignment.course_id)
            .where(Enrollment.student_id == student_id, Enrollment.status == EnrollmentStatus.registered)
            .order_by(Assignment.due_date)
        )
        return list(db.scalars(stmt).all())

class CRUDGrade(CRUDBase[Grade, GradeCreate, GradeUpdate]):
    def for_student(self, db: Session, student_id: int) -> List[Grade]:
        return list(db.scalars(select(Grade).where(Grade.student_id == student_id).order_by(Grade.id)).all())

    def for_assignment(self, db: Session, assignment_id: int) -> List[Grade]:
        return list(db.scalars(select(Grade).where(Grade.assignment_id == assignment_id).order_by(Grade.id)).all())

    def regrade(self, db: Session, grade: Grade, obj_in: GradeUpdate) -> Grade:
        return self.update(db, grade, {
            "score": obj_in.score,
            "feedback": obj_in.feedback,
            "graded_at": datetime.now(timezone.utc),
        })

assignment_crud = CRUDAssignment(Assignment)
grade_crud = CRUDGrade(Grade)
