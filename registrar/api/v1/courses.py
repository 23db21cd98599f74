# registrar/api/v1/courses.py
from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from registrar.api.deps import get_db
from registrar.core.rbac import require_roles, ROLE_ADMIN, ROLE_FACULTY
from registrar.crud.course import course_crud, CourseFilters
from registrar.crud.department import department_crud
from registrar.models.user import User
from registrar.schemas.course import Course, CourseCreate, CourseUpdate
from registrar.schemas.department import Department, DepartmentCreate
from registrar.schemas.moodle import MoodleLink, MoodleLinkCreate
from registrar.schemas.schedule import Schedule, ScheduleCreate

router = APIRouter()

# ---------------- departments ----------------

@router.get("/departments", response_model=List[Department])
def list_departments(db: Session = Depends(get_db)):
    return department_crud.list(db)

@router.post("/departments", response_model=Department, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(ROLE_ADMIN))])
def create_department(body: DepartmentCreate, db: Session = Depends(get_db)):
    return department_crud.create(db, body)

# ---------------- courses ----------------

@router.get("/courses", response_model=List[Course])
def list_courses(
    department_id: Optional[int] = Query(None, alias="departmentId"),
    level: Optional[int] = Query(None),
    credits: Optional[int] = Query(None),
    delivery_mode: Optional[str] = Query(None, alias="deliveryMode"),
    search: Optional[str] = Query(None, description="Matches code, title or description"),
    semester: Optional[str] = Query(None),
    year: Optional[int] = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    filters = CourseFilters(
        department_id=department_id, level=level, credits=credits, delivery_mode=delivery_mode,
        search=search, semester=semester, year=year,
    )
    return course_crud.list(db, filters, skip=skip, limit=limit)

@router.get("/courses/{course_id}", response_model=Course)
def get_course(course_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return course_crud.get_or_raise(db, course_id)

@router.post("/courses", response_model=Course, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(ROLE_ADMIN))])
def create_course(body: CourseCreate, db: Session = Depends(get_db)):
    department_crud.get_or_raise(db, body.department_id)
    if course_crud.get_by_code(db, body.code):
        raise HTTPException(status_code=400, detail="Course code already exists")
    return course_crud.create(db, body)

@router.patch("/courses/{course_id}", response_model=Course,
              dependencies=[Depends(require_roles(ROLE_ADMIN))])
def update_course(body: CourseUpdate, course_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    course = course_crud.get_or_raise(db, course_id)
    if not body.model_dump(exclude_unset=True):
        raise HTTPException(status_code=400, detail="No fields to update")
    return course_crud.update(db, course, body)

@router.get("/faculty/courses", response_model=List[Course])
def my_courses(user: User = Depends(require_roles(ROLE_FACULTY)), db: Session = Depends(get_db)):
    return course_crud.list(db, CourseFilters(instructor_id=user.id))

# ---------------- schedules ----------------

@router.get("/courses/{course_id}/schedules", response_model=List[Schedule])
def list_schedules(course_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    return course_crud.schedules(db, course_id)

@router.post("/courses/{course_id}/schedules", response_model=Schedule, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(ROLE_ADMIN))])
def add_schedule(body: ScheduleCreate, course_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    course_crud.get_or_raise(db, course_id)
    return course_crud.add_schedule(db, course_id, body)

# ---------------- moodle ----------------

@router.get("/courses/{course_id}/moodle", response_model=MoodleLink)
def get_moodle_link(course_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    link = course_crud.moodle_link(db, course_id)
    if not link:
        raise HTTPException(status_code=404, detail="Moodle course not linked")
    return link

@router.post("/courses/{course_id}/moodle", response_model=MoodleLink,
             dependencies=[Depends(require_roles(ROLE_ADMIN))])
def link_moodle(body: MoodleLinkCreate, course_id: int = Path(..., ge=1), db: Session = Depends(get_db)):
    course_crud.get_or_raise(db, course_id)
    return course_crud.link_moodle(db, course_id, body.moodle_id)
