# registrar/crud/notification.py
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session
from registrar.crud.base import CRUDBase
from registrar.models.notification import Notification
from registrar.schemas.notification import NotificationCreate

class CRUDNotification(CRUDBase[Notification, NotificationCreate, NotificationCreate]):
    def for_user(self, db: Session, user_id: int) -> List[Notification]:
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
        )
        return list(db.scalars(stmt).all())

    def mark_read(self, db: Session, notification: Notification) -> Notification:
        if notification.is_read:
            return notification
        return self.update(db, notification, {"is_read": True})

notification_crud = CRUDNotification(Notification)
