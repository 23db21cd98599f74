# registrar/api/v1/coursework.py
from __future__ import annotations
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from registrar.api.deps import get_db, get_current_user
from registrar.core.rbac import require_roles, ROLE_FACULTY
from registrar.crud.course import course_crud
from registrar.crud.coursework import assignment_crud, grade_crud
from registrar.crud.user import user_crud
from registrar.models.user import User
from registrar.schemas.assignment import Assignment, AssignmentCreate
from registrar.schemas.grade import Grade, GradeCreate, GradeUpdate

router = APIRouter()

# ---------------- assignments ----------------

@router.get("/courses/{course_id}/assignments", response_model=List[Assignment])
def course_assignments(course_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return assignment_crud.for_course(db, course_id)

@router.get("/student/assignments", response_model=List[Assignment])
def my_assignments(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return assignment_crud.for_student(db, user.id)

@router.post("/assignments", response_model=Assignment, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(ROLE_FACULTY))])
def create_assignment(body: AssignmentCreate, db: Session = Depends(get_db)):
    course_crud.get_or_raise(db, body.course_id)
    return assignment_crud.create(db, body)

# ---------------- grades ----------------

@router.get("/student/grades", response_model=List[Grade])
def my_grades(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return grade_crud.for_student(db, user.id)

@router.get("/assignments/{assignment_id}/grades", response_model=List[Grade],
            dependencies=[Depends(require_roles(ROLE_FACULTY))])
def assignment_grades(assignment_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return grade_crud.for_assignment(db, assignment_id)

@router.post("/grades", response_model=Grade, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(ROLE_FACULTY))])
def create_grade(body: GradeCreate, db: Session = Depends(get_db)):
    assignment = assignment_crud.get_or_raise(db, body.assignment_id)
    if user_crud.get(db, body.student_id) is None:
        raise HTTPException(status_code=404, detail="Student not found")
    if body.score > assignment.total_points:
        raise HTTPException(status_code=400, detail="Score exceeds total points")
    return grade_crud.create(db, body)

@router.put("/grades/{grade_id}", response_model=Grade,
            dependencies=[Depends(require_roles(ROLE_FACULTY))])
def regrade(body: GradeUpdate, grade_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    grade = grade_crud.get_or_raise(db, grade_id)
    return grade_crud.regrade(db, grade, body)
