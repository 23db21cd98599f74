# registrar/api/v1/events.py
from datetime import datetime
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from registrar.api.deps import get_db
from registrar.core.rbac import require_roles, ROLE_ADMIN, ROLE_FACULTY
from registrar.crud.event import event_crud
from registrar.schemas.event import Event, EventCreate

router = APIRouter()

@router.get("/events", response_model=List[Event])
def list_events(
    start: Optional[datetime] = Query(None),
    end: Optional[datetime] = Query(None),
    type: Optional[Literal["deadline", "exam", "holiday", "other"]] = Query(None),
    course_id: Optional[int] = Query(None, alias="courseId"),
    db: Session = Depends(get_db),
):
    return event_crud.list(db, start=start, end=end, type=type, course_id=course_id)

@router.post("/events", response_model=Event, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(require_roles(ROLE_ADMIN, ROLE_FACULTY))])
def create_event(body: EventCreate, db: Session = Depends(get_db)):
    return event_crud.create(db, body)
