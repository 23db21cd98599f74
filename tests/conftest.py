# tests/conftest.py
import os
import tempfile

_tmp = tempfile.mkdtemp(prefix="registrar-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmp, 'test.db')}"
os.environ["DATA_DIR"] = _tmp
os.environ["SEED_DEMO_DATA"] = "false"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from registrar.core.tokens import create_access_token
from registrar.crud.course import course_crud
from registrar.crud.department import department_crud
from registrar.crud.user import user_crud
from registrar.db.base import Base
from registrar.db.session import SessionLocal, engine
from registrar.main import api
from registrar.schemas.course import CourseCreate
from registrar.schemas.department import DepartmentCreate
from registrar.schemas.user import UserCreate

PASSWORD = "password123"

@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db():
    with SessionLocal() as session:
        yield session

@pytest.fixture
def client():
    # no context manager: lifespan (alembic + seed) stays off, tables come from _schema
    return TestClient(api)

@pytest.fixture
def make_user(db):
    def _make(username: str, role: str = "student"):
        return user_crud.create(db, UserCreate(
            username=username, email=f"{username}@university.edu",
            first_name=username.title(), last_name="Tester",
            password=PASSWORD, role=role,
        ))
    return _make

@pytest.fixture
def student(make_user):
    return make_user("alice")

@pytest.fixture
def other_student(make_user):
    return make_user("bob")

@pytest.fixture
def faculty(make_user):
    return make_user("prof", role="faculty")

@pytest.fixture
def admin(make_user):
    return make_user("root", role="admin")

@pytest.fixture
def department(db):
    return department_crud.create(db, DepartmentCreate(code="CS", name="Computer Science"))

@pytest.fixture
def make_course(db, department):
    def _make(code: str = "CS101", capacity: int = 2, instructor_id=None, **overrides):
        data = dict(
            code=code, title=f"Course {code}", description="An introductory course.",
            credits=3, department_id=department.id, instructor_id=instructor_id,
            capacity=capacity, delivery_mode="in-person", level=100,
            semester="Fall", year=2024,
        )
        data.update(overrides)
        return course_crud.create(db, CourseCreate(**data))
    return _make

@pytest.fixture
def course(make_course, faculty):
    return make_course(capacity=2, instructor_id=faculty.id)

@pytest.fixture
def headers_for():
    def _headers(user) -> dict:
        token = create_access_token(sub=user.username, role=user.role.value)
        return {"Authorization": f"Bearer {token}"}
    return _headers
