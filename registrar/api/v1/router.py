# registrar/api/v1/router.py
from fastapi import APIRouter
from registrar.api.v1 import (
    auth,
    users,
    courses,
    enrollments,
    coursework,
    notifications,
    events,
)

api_router = APIRouter()

api_router.include_router(auth.router,          tags=["auth"])
api_router.include_router(users.router,         tags=["users"])
api_router.include_router(courses.router,       tags=["catalog"])
api_router.include_router(enrollments.router,   tags=["enrollments"])
api_router.include_router(coursework.router,    tags=["coursework"])
api_router.include_router(notifications.router, tags=["notifications"])
api_router.include_router(events.router,        tags=["events"])
