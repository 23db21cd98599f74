# registrar/models/__init__.py
from registrar.models.user import User, UserRole
from registrar.models.department import Department
from registrar.models.course import Course, DeliveryMode
from registrar.models.schedule import Schedule
from registrar.models.enrollment import Enrollment, EnrollmentStatus
from registrar.models.assignment import Assignment
from registrar.models.grade import Grade
from registrar.models.notification import Notification
from registrar.models.event import Event
from registrar.models.moodle_course import MoodleCourse
from registrar.models.tokens import RevokedToken

__all__ = [
    "User", "UserRole",
    "Department",
    "Course", "DeliveryMode",
    "Schedule",
    "Enrollment", "EnrollmentStatus",
    "Assignment",
    "Grade",
    "Notification",
    "Event",
    "MoodleCourse",
    "RevokedToken",
]
