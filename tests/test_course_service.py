# /tests/test_course_service.py

import pytest

from lms.core import errors
from lms.models.course_model import CourseCreate, EnrollRequest, LectureCreate
from lms.services import course_service


@pytest.fixture
def teacher(make_user):
    return make_user("teacher", name="Tess Teacher")


@pytest.fixture
def student(make_user):
    return make_user("student")


@pytest.fixture
def course(teacher, make_course):
    return make_course(teacher.id)


def test_create_course_requires_title(teacher, db_service):
    with pytest.raises(errors.ValidationError, match="Please provide a course title"):
        course_service.create_course(CourseCreate(description="no title"), db=db_service, teacher_id=teacher.id)


def test_create_course_records_owner(teacher, db_service):
    course = course_service.create_course(CourseCreate(title="Algebra"), db=db_service, teacher_id=teacher.id)
    assert course["teacherId"] == teacher.id
    assert course["description"] == ""
    assert course_service.list_teacher_courses(db=db_service, teacher_id=teacher.id)[0]["id"] == course["id"]


def test_catalogue_names_teachers(teacher, course, make_user, make_course, db_service):
    gone = make_user("teacher")
    make_course(gone.id, title="Abandoned")
    db_service.delete_user(gone.id)

    names = {c["title"]: c["teacherName"] for c in course_service.list_all_courses(db=db_service)}

    assert names[course.title] == "Tess Teacher"
    assert names["Abandoned"] == "Unknown Teacher"


# --- Enrollment ---

def test_duplicate_enrollment_is_rejected(student, course, db_service):
    """
    GIVEN a student already enrolled in a course
    WHEN they enroll again
    THEN a conflict is raised and exactly one enrollment exists.
    """
    course_service.enroll(EnrollRequest(courseId=course.id), db=db_service, student_id=student.id)

    with pytest.raises(errors.ConflictError, match="You are already enrolled in this course"):
        course_service.enroll(EnrollRequest(courseId=course.id), db=db_service, student_id=student.id)

    assert len(db_service.get_enrollments_by_course(course.id)) == 1
    print("\n✅ SUCCESS: test_duplicate_enrollment_is_rejected passed.")


def test_enrollment_race_is_reported_as_conflict(student, course, db_service, mocker):
    mocker.patch.object(db_service, "add_enrollment", return_value=None)
    with pytest.raises(errors.ConflictError):
        course_service.enroll(EnrollRequest(courseId=course.id), db=db_service, student_id=student.id)


def test_enroll_validation(student, db_service):
    with pytest.raises(errors.ValidationError, match="Please provide a courseId"):
        course_service.enroll(EnrollRequest(), db=db_service, student_id=student.id)
    with pytest.raises(errors.NotFoundError, match="Course not found"):
        course_service.enroll(EnrollRequest(courseId="crs_missing"), db=db_service, student_id=student.id)


def test_enrolled_courses_skip_deleted_courses(student, course, db_service):
    course_service.enroll(EnrollRequest(courseId=course.id), db=db_service, student_id=student.id)
    db_service.add_enrollment({"id": "enr_orphan", "student_id": student.id, "course_id": "crs_gone"})

    enrolled = course_service.list_enrolled_courses(db=db_service, student_id=student.id)

    assert [c["id"] for c in enrolled] == [course.id]
    assert enrolled[0]["teacherName"] == "Tess Teacher"


def test_course_enrollments_include_student_identity(student, course, db_service):
    course_service.enroll(EnrollRequest(courseId=course.id), db=db_service, student_id=student.id)
    rows = course_service.list_course_enrollments(course.id, db=db_service)
    assert rows[0]["studentName"] == student.name
    assert rows[0]["studentEmail"] == student.email


# --- Lectures ---

def test_lecture_requires_fields(db_service):
    with pytest.raises(errors.ValidationError, match="Please provide courseId, title, and videoUrl"):
        course_service.create_lecture(LectureCreate(courseId="crs_1", title="No video"), db=db_service)


def test_lectures_listed_by_order(course, db_service):
    for title, order in [("Third", 3), ("First", None), ("Second", 2)]:
        course_service.create_lecture(
            LectureCreate(courseId=course.id, title=title, videoUrl="https://v.example.com/x.mp4", order=order),
            db=db_service,
        )

    lectures = course_service.list_course_lectures(course.id, db=db_service)

    assert [l["title"] for l in lectures] == ["First", "Second", "Third"]
    assert lectures[0]["order"] == 1
