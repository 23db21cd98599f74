# registrar/db/init_db.py
import logging
from sqlalchemy import select
from sqlalchemy.orm import Session

from registrar.core.security_password import hash_password
from registrar.models.course import Course, DeliveryMode
from registrar.models.department import Department
from registrar.models.user import User, UserRole

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"
DEMO_USERS = [
    ("student", "student@university.edu", "Sample", "Student", UserRole.student),
    ("faculty", "faculty@university.edu", "Sample", "Faculty", UserRole.faculty),
    ("admin", "admin@university.edu", "Sample", "Admin", UserRole.admin),
]

def init_db(db: Session) -> None:
    """Idempotent seed: one account per role and a small catalog."""
    users = {}
    for username, email, first, last, role in DEMO_USERS:
        user = db.scalar(select(User).where(User.username == username))
        if not user:
            user = User(username=username, email=email, first_name=first, last_name=last,
                        role=role, hashed_password=hash_password(DEMO_PASSWORD))
            db.add(user); db.flush()
            logger.info("created %s account: %s", role.value, username)
        users[username] = user

    dept = db.scalar(select(Department).where(Department.code == "CS"))
    if not dept:
        dept = Department(code="CS", name="Computer Science")
        db.add(dept); db.flush()

    if not db.scalar(select(Course).where(Course.code == "CS101")):
        db.add(Course(
            code="CS101", title="Introduction to Programming",
            description="Fundamentals of programming in Python.",
            credits=3, department_id=dept.id, instructor_id=users["faculty"].id,
            capacity=30, seats_taken=0, delivery_mode=DeliveryMode.in_person.value,
            level=100, semester="Fall", year=2024,
        ))

    db.commit()
