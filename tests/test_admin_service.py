# /tests/test_admin_service.py

import pytest

from lms.core import errors, security
from lms.models.user_model import AdminCreate
from lms.services import admin_service


@pytest.fixture
def admin(make_user):
    return make_user("admin")


def test_stats_count_by_role(admin, make_user, make_course, db_service):
    teacher = make_user("teacher")
    student = make_user("student")
    make_user("student")
    course = make_course(teacher.id)
    db_service.add_enrollment({"id": "enr_1", "student_id": student.id, "course_id": course.id})

    stats = admin_service.get_stats(admin.id, db=db_service)

    assert stats == {
        "adminId": admin.id,
        "totalUsers": 4,
        "totalStudents": 2,
        "totalTeachers": 1,
        "totalCourses": 1,
        "totalEnrollments": 1,
    }


def test_teacher_course_counts(make_user, make_course, db_service):
    busy = make_user("teacher", name="Busy")
    make_user("teacher", name="Idle")
    make_user("student", name="Not A Teacher")
    make_course(busy.id, "One")
    make_course(busy.id, "Two")

    counts = {t["name"]: t["courseCount"] for t in admin_service.list_teachers(db=db_service)}

    assert counts == {"Busy": 2, "Idle": 0}


def test_enrollment_overview_with_orphans(make_user, make_course, db_service):
    """
    GIVEN enrollments whose student or course has since disappeared
    WHEN the overview is built
    THEN placeholders stand in for the missing names and every course is counted.
    """
    teacher = make_user("teacher")
    student = make_user("student", name="Gone Soon")
    course = make_course(teacher.id, "Kept")
    empty = make_course(teacher.id, "Empty")
    db_service.add_enrollment({"id": "enr_1", "student_id": student.id, "course_id": course.id})
    db_service.add_enrollment({"id": "enr_2", "student_id": student.id, "course_id": "crs_deleted"})
    db_service.delete_user(student.id)

    overview = admin_service.get_enrollment_overview(db=db_service)

    assert overview["totalEnrollments"] == 2
    rows = {r["id"]: r for r in overview["enrollmentsByStudents"]}
    assert rows["enr_1"]["studentName"] == "Unknown Student"
    assert rows["enr_1"]["studentEmail"] == "N/A"
    assert rows["enr_1"]["courseName"] == "Kept"
    assert rows["enr_2"]["courseName"] == "Unknown Course"
    by_course = {r["courseId"]: r["studentCount"] for r in overview["enrollmentsByCourse"]}
    assert by_course == {course.id: 1, empty.id: 0}
    print("\n✅ SUCCESS: test_enrollment_overview_with_orphans passed.")


def test_course_list_with_missing_teacher(make_user, make_course, db_service):
    teacher = make_user("teacher")
    make_course(teacher.id)
    db_service.delete_user(teacher.id)

    course = admin_service.list_courses(db=db_service)[0]

    assert course["teacherName"] == "Unknown Teacher"
    assert course["teacherEmail"] == "N/A"


def test_list_users_hides_password(admin, db_service):
    users = admin_service.list_users(db=db_service)
    assert users[0]["id"] == admin.id
    assert "password" not in users[0]


# --- User management ---

def test_create_admin_hashes_password(db_service):
    created = admin_service.create_admin(
        AdminCreate(name="Root", email="root@example.com", password="s3cret!"), db=db_service,
    )

    stored = db_service.get_user_by_id(created["id"])
    assert created["role"] == "admin"
    assert stored.password != "s3cret!"
    assert security.verify_password("s3cret!", stored.password)
    assert stored.email_verified is True


def test_create_admin_validation_and_duplicates(admin, db_service):
    with pytest.raises(errors.ValidationError, match="Name, email, and password are required"):
        admin_service.create_admin(AdminCreate(name="X", email="x@example.com"), db=db_service)
    with pytest.raises(errors.ConflictError, match="Email already registered"):
        admin_service.create_admin(AdminCreate(name="X", email=admin.email, password="pw"), db=db_service)


def test_change_role(make_user, db_service):
    user = make_user("student")
    assert admin_service.change_role(user.id, "teacher", db=db_service)["role"] == "teacher"

    with pytest.raises(errors.ValidationError, match="Invalid role"):
        admin_service.change_role(user.id, "superuser", db=db_service)
    with pytest.raises(errors.NotFoundError):
        admin_service.change_role("usr_missing", "teacher", db=db_service)


def test_admin_cannot_delete_self(admin, db_service):
    """
    GIVEN an authenticated admin
    WHEN they try to delete their own account
    THEN the request is refused and the record is still there.
    """
    with pytest.raises(errors.ValidationError, match="Cannot delete your own admin account"):
        admin_service.delete_user(admin.id, admin_id=admin.id, db=db_service)

    assert db_service.get_user_by_id(admin.id) is not None
    print("\n✅ SUCCESS: test_admin_cannot_delete_self passed.")


def test_delete_other_user(admin, make_user, db_service):
    victim = make_user("student", name="Victim")
    deleted = admin_service.delete_user(victim.id, admin_id=admin.id, db=db_service)

    assert deleted["id"] == victim.id
    assert db_service.get_user_by_id(victim.id) is None
    with pytest.raises(errors.NotFoundError, match="User not found"):
        admin_service.delete_user(victim.id, admin_id=admin.id, db=db_service)
