# registrar/api/v1/notifications.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from registrar.api.deps import get_db, get_current_user
from registrar.crud.notification import notification_crud
from registrar.models.user import User
from registrar.schemas.notification import Notification

router = APIRouter()

@router.get("/notifications", response_model=List[Notification])
def my_notifications(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return notification_crud.for_user(db, user.id)

@router.post("/notifications/{notification_id}/read", response_model=Notification)
def mark_read(
    notification_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    n = notification_crud.get(db, notification_id)
    if not n or n.user_id != user.id:
        raise HTTPException(status_code=404, detail="Notification not found")
    return notification_crud.mark_read(db, n)
