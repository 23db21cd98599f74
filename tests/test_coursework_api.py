# tests/test_coursework_api.py
import pytest

from registrar.crud.enrollment import enrollment_crud
from registrar.crud.notification import notification_crud
from registrar.schemas.notification import NotificationCreate


@pytest.fixture
def assignment(client, course, faculty, headers_for):
    r = client.post("/api/assignments", json={
        "courseId": course.id, "title": "Homework 1", "description": "Loops",
        "dueDate": "2024-10-15T23:59:00Z", "totalPoints": 100,
    }, headers=headers_for(faculty))
    assert r.status_code == 201
    return r.json()


def test_students_cannot_create_assignments(client, course, student, headers_for):
    r = client.post("/api/assignments", json={
        "courseId": course.id, "title": "x", "description": "y",
        "dueDate": "2024-10-15T23:59:00Z", "totalPoints": 10,
    }, headers=headers_for(student))
    assert r.status_code == 403


def test_assignments_follow_registered_enrollments(client, db, course, assignment, student, headers_for):
    h = headers_for(student)
    assert client.get("/api/student/assignments", headers=h).json() == []

    enr = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)
    assert [a["title"] for a in client.get("/api/student/assignments", headers=h).json()] == ["Homework 1"]

    enrollment_crud.update_status(db, enrollment_id=enr.id, status="dropped")
    assert client.get("/api/student/assignments", headers=h).json() == []

    assert len(client.get(f"/api/courses/{course.id}/assignments").json()) == 1


def test_grading(client, assignment, faculty, student, headers_for):
    fh = headers_for(faculty)
    over = {"assignmentId": assignment["id"], "studentId": student.id, "score": 120}
    assert client.post("/api/grades", json=over, headers=fh).status_code == 400

    r = client.post("/api/grades", json={**over, "score": 88}, headers=fh)
    assert r.status_code == 201
    grade_id = r.json()["id"]

    r = client.put(f"/api/grades/{grade_id}", json={"score": 91, "feedback": "nice"}, headers=fh)
    assert r.status_code == 200
    assert r.json()["score"] == 91
    assert r.json()["gradedAt"] is not None

    mine = client.get("/api/student/grades", headers=headers_for(student)).json()
    assert [(g["score"], g["feedback"]) for g in mine] == [(91, "nice")]
    assert client.put("/api/grades/999", json={"score": 1}, headers=fh).status_code == 404


def test_notifications_inbox(client, db, student, other_student, headers_for):
    first = notification_crud.create(db, NotificationCreate(user_id=student.id, title="a", message="one"))
    second = notification_crud.create(db, NotificationCreate(user_id=student.id, title="b", message="two",
                                                             type="warning"))
    theirs = notification_crud.create(db, NotificationCreate(user_id=other_student.id, title="c", message="x"))
    h = headers_for(student)

    r = client.get("/api/notifications", headers=h)
    assert [n["id"] for n in r.json()] == [second.id, first.id]
    assert all(n["isRead"] is False for n in r.json())

    r = client.post(f"/api/notifications/{first.id}/read", headers=h)
    assert r.status_code == 200
    assert r.json()["isRead"] is True

    assert client.post(f"/api/notifications/{theirs.id}/read", headers=h).status_code == 404
    assert client.post("/api/notifications/999/read", headers=h).status_code == 404


def test_events(client, course, admin, student, headers_for):
    exam = {"title": "Midterm", "startDate": "2024-10-20T09:00:00", "endDate": "2024-10-20T11:00:00",
            "type": "exam", "courseId": course.id}
    holiday = {"title": "Break", "startDate": "2024-11-25T00:00:00", "endDate": "2024-11-29T00:00:00",
               "type": "holiday"}
    assert client.post("/api/events", json=exam, headers=headers_for(student)).status_code == 403
    for ev in (exam, holiday):
        assert client.post("/api/events", json=ev, headers=headers_for(admin)).status_code == 201

    assert [e["title"] for e in client.get("/api/events").json()] == ["Midterm", "Break"]
    assert [e["title"] for e in client.get("/api/events", params={"type": "holiday"}).json()] == ["Break"]
    assert [e["title"] for e in client.get("/api/events", params={"courseId": course.id}).json()] == ["Midterm"]

    backwards = {**holiday, "endDate": "2024-11-01T00:00:00"}
    assert client.post("/api/events", json=backwards, headers=headers_for(admin)).status_code == 400


def test_admin_stats(client, db, course, admin, student, other_student, headers_for):
    enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)
    enr = enrollment_crud.enroll(db, student_id=other_student.id, course_id=course.id)
    enrollment_crud.update_status(db, enrollment_id=enr.id, status="dropped")

    r = client.get("/api/admin/stats", headers=headers_for(admin))

    assert r.status_code == 200
    body = r.json()
    assert body["usersByRole"] == {"student": 2, "faculty": 1, "admin": 1}
    assert body["enrollmentsByStatus"] == {"registered": 1, "waitlisted": 0, "dropped": 1}
    assert body["seatsOffered"] == 2
    assert body["seatsTaken"] == 1
    assert body["courses"] == 1
    assert client.get("/api/admin/stats", headers=headers_for(student)).status_code == 403


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}
