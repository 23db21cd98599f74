# registrar/crud/stats.py
from sqlalchemy import select, func
from sqlalchemy.orm import Session
from registrar.crud.course import course_crud
from registrar.crud.department import department_crud
from registrar.crud.user import user_crud
from registrar.models.course import Course
from registrar.models.enrollment import Enrollment, EnrollmentStatus
from registrar.schemas.stats import AdminStats

def admin_stats(db: Session) -> AdminStats:
    by_status = {s.value: 0 for s in EnrollmentStatus}
    for status, n in db.execute(select(Enrollment.status, func.count()).group_by(Enrollment.status)).all():
        by_status[status.value] = n
    offered, taken = db.execute(
        select(func.coalesce(func.sum(Course.capacity), 0), func.coalesce(func.sum(Course.seats_taken), 0))
    ).one()
    return AdminStats(
        users_by_role=user_crud.count_by_role(db),
        courses=course_crud.count(db),
        departments=department_crud.count(db),
        enrollments_by_status=by_status,
        seats_offered=int(offered),
        seats_taken=int(taken),
    )
