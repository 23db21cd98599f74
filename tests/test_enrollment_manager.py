# tests/test_enrollment_manager.py
import threading

import pytest

from registrar.core.config import settings
from registrar.core.errors import (
    DuplicateEnrollmentError,
    InvalidStatusError,
    NotFoundError,
    PermissionDeniedError,
)
from registrar.crud.enrollment import enrollment_crud
from registrar.db.session import SessionLocal
from registrar.models.enrollment import Enrollment, EnrollmentStatus


def _seats(db, course):
    db.refresh(course)
    return course.seats_taken


def test_capacity_two_admits_two_then_waitlists(db, course, make_user):
    s1, s2, s3 = make_user("s1x"), make_user("s2x"), make_user("s3x")

    first = enrollment_crud.enroll(db, student_id=s1.id, course_id=course.id)
    second = enrollment_crud.enroll(db, student_id=s2.id, course_id=course.id)
    third = enrollment_crud.enroll(db, student_id=s3.id, course_id=course.id)

    assert first.status == EnrollmentStatus.registered
    assert second.status == EnrollmentStatus.registered
    assert third.status == EnrollmentStatus.waitlisted
    assert _seats(db, course) == 2


@pytest.mark.parametrize("capacity,already", [(1, 0), (3, 2), (3, 3), (0, 0)])
def test_status_depends_on_registered_count(db, make_course, make_user, capacity, already):
    course = make_course(code="MATH200", capacity=capacity)
    for i in range(already):
        enrollment_crud.enroll(db, student_id=make_user(f"pre{i}").id, course_id=course.id)

    enr = enrollment_crud.enroll(db, student_id=make_user("late").id, course_id=course.id)

    expected = EnrollmentStatus.registered if already < capacity else EnrollmentStatus.waitlisted
    assert enr.status == expected


def test_waitlisted_and_dropped_do_not_hold_seats(db, make_course, make_user):
    course = make_course(code="BIO110", capacity=1)
    a, b, c = make_user("a1x"), make_user("b1x"), make_user("c1x")
    ea = enrollment_crud.enroll(db, student_id=a.id, course_id=course.id)
    eb = enrollment_crud.enroll(db, student_id=b.id, course_id=course.id)
    assert eb.status == EnrollmentStatus.waitlisted

    enrollment_crud.update_status(db, enrollment_id=ea.id, status="dropped")
    assert _seats(db, course) == 0

    # the freed seat goes to the next request, not to the waitlisted record
    ec = enrollment_crud.enroll(db, student_id=c.id, course_id=course.id)
    assert ec.status == EnrollmentStatus.registered
    assert db.get(Enrollment, eb.id).status == EnrollmentStatus.waitlisted


def test_duplicate_request_is_rejected(db, course, student):
    enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)

    with pytest.raises(DuplicateEnrollmentError):
        enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)
    assert len(enrollment_crud.list_for_student(db, student_id=student.id)) == 1


def test_unknown_course_is_not_found(db, student):
    with pytest.raises(NotFoundError):
        enrollment_crud.enroll(db, student_id=student.id, course_id=9999)
    assert enrollment_crud.list_for_student(db, student_id=student.id) == []


def test_drop_then_reenroll_is_rejected_by_default(db, course, student):
    enr = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)
    enrollment_crud.update_status(db, enrollment_id=enr.id, status="dropped")

    with pytest.raises(DuplicateEnrollmentError):
        enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)


def test_drop_then_reenroll_reactivates_when_allowed(db, course, student, monkeypatch):
    monkeypatch.setattr(settings, "ENROLLMENT_ALLOW_REENROLL_AFTER_DROP", True)
    enr = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)
    enrollment_crud.update_status(db, enrollment_id=enr.id, status="dropped")

    again = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)

    assert again.id == enr.id
    assert again.status == EnrollmentStatus.registered
    assert _seats(db, course) == 1


def test_reenroll_flag_still_rejects_active_records(db, course, student, monkeypatch):
    monkeypatch.setattr(settings, "ENROLLMENT_ALLOW_REENROLL_AFTER_DROP", True)
    enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)

    with pytest.raises(DuplicateEnrollmentError):
        enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)


def test_update_status_unknown_id(db, course, student):
    enr = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)

    with pytest.raises(NotFoundError):
        enrollment_crud.update_status(db, enrollment_id=enr.id + 100, status="dropped")
    assert db.get(Enrollment, enr.id).status == EnrollmentStatus.registered
    assert _seats(db, course) == 1


@pytest.mark.parametrize("bad", ["enrolled", "REGISTERED", "", None, "deleted"])
def test_update_status_rejects_unknown_literals_before_lookup(db, bad, monkeypatch):
    def _boom(*args, **kwargs):
        raise AssertionError("store touched")
    monkeypatch.setattr(db, "get", _boom)

    with pytest.raises(InvalidStatusError):
        enrollment_crud.update_status(db, enrollment_id=1, status=bad)


def test_dropped_to_registered_bypasses_capacity(db, make_course, make_user):
    course = make_course(code="ART100", capacity=1)
    a, b = make_user("a2x"), make_user("b2x")
    ea = enrollment_crud.enroll(db, student_id=a.id, course_id=course.id)
    eb = enrollment_crud.enroll(db, student_id=b.id, course_id=course.id)
    enrollment_crud.update_status(db, enrollment_id=eb.id, status="dropped")

    revived = enrollment_crud.update_status(db, enrollment_id=eb.id, status="registered")

    assert revived.status == EnrollmentStatus.registered
    assert db.get(Enrollment, ea.id).status == EnrollmentStatus.registered
    assert _seats(db, course) == 2


def test_seat_counter_follows_transitions(db, course, student):
    enr = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)
    assert _seats(db, course) == 1
    enrollment_crud.update_status(db, enrollment_id=enr.id, status="waitlisted")
    assert _seats(db, course) == 0
    enrollment_crud.update_status(db, enrollment_id=enr.id, status="waitlisted")
    assert _seats(db, course) == 0
    enrollment_crud.update_status(db, enrollment_id=enr.id, status=EnrollmentStatus.registered)
    assert _seats(db, course) == 1


def test_ownership_enforced_for_other_students(db, course, student, other_student):
    enr = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)

    with pytest.raises(PermissionDeniedError):
        enrollment_crud.update_status(db, enrollment_id=enr.id, status="dropped", actor=other_student)
    assert db.get(Enrollment, enr.id).status == EnrollmentStatus.registered


def test_owner_instructor_and_admin_may_transition(db, course, student, faculty, admin):
    enr = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)

    assert enrollment_crud.update_status(db, enrollment_id=enr.id, status="waitlisted", actor=student).status == EnrollmentStatus.waitlisted
    assert enrollment_crud.update_status(db, enrollment_id=enr.id, status="registered", actor=faculty).status == EnrollmentStatus.registered
    assert enrollment_crud.update_status(db, enrollment_id=enr.id, status="dropped", actor=admin).status == EnrollmentStatus.dropped


def test_ownership_check_can_be_disabled(db, course, student, other_student, monkeypatch):
    monkeypatch.setattr(settings, "ENROLLMENT_ENFORCE_OWNERSHIP", False)
    enr = enrollment_crud.enroll(db, student_id=student.id, course_id=course.id)

    updated = enrollment_crud.update_status(db, enrollment_id=enr.id, status="dropped", actor=other_student)

    assert updated.status == EnrollmentStatus.dropped


def test_list_for_course_filters_by_status(db, make_course, make_user):
    course = make_course(code="PHY101", capacity=1)
    enrollment_crud.enroll(db, student_id=make_user("p1x").id, course_id=course.id)
    enrollment_crud.enroll(db, student_id=make_user("p2x").id, course_id=course.id)

    assert len(enrollment_crud.list_for_course(db, course_id=course.id)) == 2
    waitlisted = enrollment_crud.list_for_course(db, course_id=course.id, status=EnrollmentStatus.waitlisted)
    assert [e.status for e in waitlisted] == [EnrollmentStatus.waitlisted]


def _race(calls):
    """Run each call on its own thread and session, released together."""
    barrier = threading.Barrier(len(calls), timeout=10)
    results, errors = [], []
    lock = threading.Lock()

    def worker(call):
        with SessionLocal() as session:
            barrier.wait()
            try:
                out = call(session)
            except Exception as exc:
                with lock:
                    errors.append(exc)
            else:
                with lock:
                    results.append(out)

    threads = [threading.Thread(target=worker, args=(call,)) for call in calls]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    return results, errors


def test_concurrent_requests_for_last_seat_admit_one(db, make_course, make_user):
    course = make_course(code="RACE1", capacity=1)
    course_id = course.id
    student_ids = [make_user(f"racer{i}").id for i in range(8)]

    def request(student_id):
        return lambda session: enrollment_crud.enroll(session, student_id=student_id, course_id=course_id).status

    results, errors = _race([request(sid) for sid in student_ids])

    assert errors == []
    assert sorted(results) == [EnrollmentStatus.registered] + [EnrollmentStatus.waitlisted] * 7
    rows = enrollment_crud.list_for_course(db, course_id=course_id)
    assert [e.status for e in rows].count(EnrollmentStatus.registered) == 1
    assert _seats(db, course) == 1


def test_concurrent_duplicate_requests_keep_one_row(db, make_course, student, monkeypatch):
    course = make_course(code="RACE2", capacity=5)
    course_id, student_id = course.id, student.id
    lookup = enrollment_crud.get_for
    both_looked = threading.Barrier(2, timeout=10)

    def get_for_then_wait(session, **kwargs):
        found = lookup(session, **kwargs)
        both_looked.wait()
        return found

    # both requests see "no enrollment yet" before either writes
    monkeypatch.setattr(enrollment_crud, "get_for", get_for_then_wait)

    def request(session):
        return enrollment_crud.enroll(session, student_id=student_id, course_id=course_id).status

    results, errors = _race([request, request])

    assert results == [EnrollmentStatus.registered]
    assert len(errors) == 1 and isinstance(errors[0], DuplicateEnrollmentError)
    assert len(enrollment_crud.list_for_course(db, course_id=course_id)) == 1
    assert _seats(db, course) == 1
