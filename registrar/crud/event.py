# registrar/crud/event.py
from datetime import datetime
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from registrar.crud.base import CRUDBase
from registrar.models.event import Event
from registrar.schemas.event import EventCreate

class CRUDEvent(CRUDBase[Event, EventCreate, EventCreate]):
    def list(self, db: Session, *, start: Optional[datetime] = None, end: Optional[datetime] = None,
             type: Optional[str] = None, course_id: Optional[int] = None) -> List[Event]:
        stmt = select(Event)
        if start is not None:
            stmt = stmt.where(Event.start_date >= start)
        if end is not None:
            stmt = stmt.where(Event.end_date <= end)
        if type:
            stmt = stmt.where(Event.type == type)
        if course_id is not None:
            stmt = stmt.where(Event.course_id == course_id)
        return list(db.scalars(stmt.order_by(Event.start_date, Event.id)).all())

event_crud = CRUDEvent(Event)
