# registrar/schemas/notification.py
from datetime import datetime
from typing import Literal, Optional
from registrar.schemas.base import APIModel

class NotificationCreate(APIModel):
    user_id: int
    title: str
    message: str
    type: Literal["info", "warning", "error", "success"] = "info"

class Notification(NotificationCreate):
    id: int
    is_read: bool = False
    created_at: Optional[datetime] = None
