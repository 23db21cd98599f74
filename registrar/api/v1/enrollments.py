# registrar/api/v1/enrollments.py
from __future__ import annotations
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from registrar.api.deps import get_db, get_current_user
from registrar.core.rbac import require_roles, ROLE_ADMIN, ROLE_FACULTY
from registrar.crud.course import course_crud
from registrar.crud.enrollment import enrollment_crud
from registrar.models.enrollment import EnrollmentStatus
from registrar.models.user import User, UserRole
from registrar.schemas.enrollment import Enrollment, EnrollmentCreate, EnrollmentStatusUpdate

router = APIRouter()

@router.get("/student/enrollments", response_model=List[Enrollment])
def my_enrollments(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return enrollment_crud.list_for_student(db, student_id=user.id)

@router.post("/enrollments", response_model=Enrollment, status_code=status.HTTP_201_CREATED)
def request_enrollment(
    body: EnrollmentCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    # the caller is always the student; body.status is ignored
    return enrollment_crud.enroll(db, student_id=user.id, course_id=body.course_id)

@router.get("/enrollments/{enrollment_id}", response_model=Enrollment)
def get_enrollment(
    enrollment_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    enr = enrollment_crud.get(db, enrollment_id)
    # other students' records are reported as missing
    if not enr or (user.role == UserRole.student and enr.student_id != user.id):
        raise HTTPException(status_code=404, detail="Enrollment not found")
    return enr

@router.put("/enrollments/{enrollment_id}/status", response_model=Enrollment)
def update_enrollment_status(
    body: EnrollmentStatusUpdate,
    enrollment_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return enrollment_crud.update_status(db, enrollment_id=enrollment_id, status=body.status, actor=user)

@router.get("/courses/{course_id}/enrollments", response_model=List[Enrollment])
def course_enrollments(
    course_id: int = Path(..., ge=1),
    status: Optional[Literal["registered", "waitlisted", "dropped"]] = Query(None),
    user: User = Depends(require_roles(ROLE_ADMIN, ROLE_FACULTY)),
    db: Session = Depends(get_db),
):
    course = course_crud.get_or_raise(db, course_id)
    if user.role == UserRole.faculty and course.instructor_id != user.id:
        raise HTTPException(status_code=403, detail="Forbidden: not the course instructor")
    wanted = EnrollmentStatus(status) if status else None
    return enrollment_crud.list_for_course(db, course_id=course_id, status=wanted)
