# registrar/crud/enrollment.py
"""Enrollment admission and status transitions.

A request is admitted as ``registered`` while the course has free seats and
as ``waitlisted`` otherwise. The registered count lives in
``courses.seats_taken`` and is only moved here, by conditional UPDATEs that
commit together with the enrollment row. Taking the last seat is therefore a
single compare-and-increment in the database: two concurrent requests can
not both see a free seat.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from registrar.core.config import settings
from registrar.core.errors import (
    DuplicateEnrollmentError,
    InvalidStatusError,
    NotFoundError,
    PermissionDeniedError,
)
from registrar.crud.base import CRUDBase
from registrar.models.course import Course
from registrar.models.enrollment import Enrollment, EnrollmentStatus
from registrar.models.user import User, UserRole
from registrar.schemas.enrollment import EnrollmentCreate, EnrollmentStatusUpdate

logger = logging.getLogger(__name__)

def _seat_delta(old: EnrollmentStatus, new: EnrollmentStatus) -> int:
    return int(new == EnrollmentStatus.registered) - int(old == EnrollmentStatus.registered)

def parse_status(value) -> EnrollmentStatus:
    try:
        return EnrollmentStatus(value)
    except ValueError:
        raise InvalidStatusError(f"Invalid status: {value!r}") from None

class CRUDEnrollment(CRUDBase[Enrollment, EnrollmentCreate, EnrollmentStatusUpdate]):
    def get_for(self, db: Session, *, student_id: int, course_id: int) -> Optional[Enrollment]:
        """Any enrollment of the pair, whatever its status."""
        return db.scalar(
            select(Enrollment).where(Enrollment.student_id == student_id, Enrollment.course_id == course_id)
        )

    def list_for_student(self, db: Session, *, student_id: int) -> List[Enrollment]:
        stmt = select(Enrollment).where(Enrollment.student_id == student_id).order_by(Enrollment.id)
        return list(db.scalars(stmt).all())

    def list_for_course(self, db: Session, *, course_id: int,
                        status: EnrollmentStatus | None = None) -> List[Enrollment]:
        stmt = select(Enrollment).where(Enrollment.course_id == course_id)
        if status is not None:
            stmt = stmt.where(Enrollment.status == status)
        return list(db.scalars(stmt.order_by(Enrollment.id)).all())

    def _take_seat(self, db: Session, course_id: int) -> bool:
        result = db.execute(
            update(Course)
            .where(Course.id == course_id, Course.seats_taken < Course.capacity)
            .values(seats_taken=Course.seats_taken + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def _shift_seats(self, db: Session, course_id: int, delta: int) -> None:
        if not delta:
            return
        db.execute(
            update(Course)
            .where(Course.id == course_id)
            .values(seats_taken=Course.seats_taken + delta)
            .execution_options(synchronize_session=False)
        )

    def enroll(self, db: Session, *, student_id: int, course_id: int) -> Enrollment:
        existing = self.get_for(db, student_id=student_id, course_id=course_id)
        if existing is not None:
            reactivate = (
                existing.status == EnrollmentStatus.dropped
                and settings.ENROLLMENT_ALLOW_REENROLL_AFTER_DROP
            )
            if not reactivate:
                raise DuplicateEnrollmentError("Already enrolled in this course")

        if db.get(Course, course_id) is None:
            raise NotFoundError("Course not found")

        status = EnrollmentStatus.registered if self._take_seat(db, course_id) else EnrollmentStatus.waitlisted

        if existing is not None:
            enr = existing
            enr.status = status
            enr.enrolled_at = datetime.now(timezone.utc)
        else:
            enr = Enrollment(student_id=student_id, course_id=course_id, status=status)
        db.add(enr)
        try:
            db.commit()
        except IntegrityError:
            # a concurrent request for the same pair won; the seat goes back with the rollback
            db.rollback()
            raise DuplicateEnrollmentError("Already enrolled in this course") from None
        db.refresh(enr)
        logger.info("enrollment id=%s student=%s course=%s -> %s",
                    enr.id, student_id, course_id, status.value)
        return enr

    def can_transition(self, db: Session, enr: Enrollment, actor: User) -> bool:
        if actor.role == UserRole.admin or actor.id == enr.student_id:
            return True
        course = db.get(Course, enr.course_id)
        return course is not None and course.instructor_id == actor.id

    def update_status(self, db: Session, *, enrollment_id: int, status,
                      actor: User | None = None) -> Enrollment:
        new = parse_status(status)
        enr = db.get(Enrollment, enrollment_id)
        if enr is None:
            raise NotFoundError("Enrollment not found")
        if actor is not None and settings.ENROLLMENT_ENFORCE_OWNERSHIP and not self.can_transition(db, enr, actor):
            raise PermissionDeniedError("Not allowed to change this enrollment")

        old = enr.status
        enr.status = new
        # no capacity check and no waitlist promotion on transitions
        self._shift_seats(db, enr.course_id, _seat_delta(old, new))
        db.add(enr); db.commit(); db.refresh(enr)
        logger.info("enrollment id=%s status %s -> %s", enr.id, old.value, new.value)
        return enr

enrollment_crud = CRUDEnrollment(Enrollment)
