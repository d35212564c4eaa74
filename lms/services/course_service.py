# /lms/services/course_service.py

"""
Business logic for courses, enrollments and lectures.

Every function takes the caller's identity explicitly (a user id resolved by
the auth gate) and the request-scoped `DatabaseService`. Validation failures
raise the domain errors from `lms.core.errors`; the routers translate them.
"""

import logging
import uuid
from typing import Dict, List

from ..core import errors
from ..models import course_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

UNKNOWN_TEACHER = "Unknown Teacher"


def _course_to_dict(course, teacher_name: str = None) -> Dict:
    data = {
        "id": course.id,
        "title": course.title,
        "description": course.description,
        "teacherId": course.teacher_id,
        "createdAt": course.created_at,
    }
    if teacher_name is not None:
        data["teacherName"] = teacher_name
    return data


def _lecture_to_dict(lecture) -> Dict:
    return {
        "id": lecture.id,
        "courseId": lecture.course_id,
        "title": lecture.title,
        "videoUrl": lecture.video_url,
        "order": lecture.order,
    }


# --- Courses ---

def create_course(course_data: course_model.CourseCreate, db: DatabaseService, teacher_id: str) -> Dict:
    if not course_data.title:
        raise errors.ValidationError("Please provide a course title")

    course_record = {
        "id": f"crs_{uuid.uuid4().hex[:12]}",
        "title": course_data.title,
        "description": course_data.description or "",
        "teacher_id": teacher_id,
    }
    course = db.add_course(course_record)
    logger.info("Course %s created by teacher %s", course.id, teacher_id)
    return _course_to_dict(course)


def list_all_courses(db: DatabaseService) -> List[Dict]:
    """
    Every course in the catalogue, newest first, each with the name of the
    teacher who created it. A course whose teacher record is gone is still
    listed under "Unknown Teacher".
    """
    courses = db.get_all_courses()
    teachers = db.get_users_by_ids(c.teacher_id for c in courses)
    return [
        _course_to_dict(c, teachers[c.teacher_id].name if c.teacher_id in teachers else UNKNOWN_TEACHER)
        for c in courses
    ]


def list_teacher_courses(db: DatabaseService, teacher_id: str) -> List[Dict]:
    return [_course_to_dict(c) for c in db.get_courses_by_teacher(teacher_id)]


def list_enrolled_courses(db: DatabaseService, student_id: str) -> List[Dict]:
    """Courses the student is enrolled in. Enrollments pointing at a deleted course are skipped."""
    enrollments = db.get_enrollments_by_student(student_id)
    courses = db.get_courses_by_ids(e.course_id for e in enrollments)
    teachers = db.get_users_by_ids(c.teacher_id for c in courses.values())

    result = []
    for enrollment in enrollments:
        course = courses.get(enrollment.course_id)
        if course is None:
            continue
        teacher = teachers.get(course.teacher_id)
        result.append(_course_to_dict(course, teacher.name if teacher else UNKNOWN_TEACHER))
    return result


# --- Enrollments ---

def enroll(enroll_data: course_model.EnrollRequest, db: DatabaseService, student_id: str) -> Dict:
    course_id = enroll_data.courseId
    if not course_id:
        raise errors.ValidationError("Please provide a courseId")

    if db.get_course_by_id(course_id) is None:
        raise errors.NotFoundError("Course not found")

    if db.get_enrollment(student_id, course_id) is not None:
        raise errors.ConflictError("You are already enrolled in this course")

    enrollment = db.add_enrollment({
        "id": f"enr_{uuid.uuid4().hex[:12]}",
        "student_id": student_id,
        "course_id": course_id,
    })
    if enrollment is None:
        # A concurrent request inserted the same pair after our check.
        raise errors.ConflictError("You are already enrolled in this course")

    logger.info("Student %s enrolled in course %s", student_id, course_id)
    return {
        "id": enrollment.id,
        "studentId": enrollment.student_id,
        "courseId": enrollment.course_id,
        "createdAt": enrollment.created_at,
    }


def list_course_enrollments(course_id: str, db: DatabaseService) -> List[Dict]:
    enrollments = db.get_enrollments_by_course(course_id)
    students = db.get_users_by_ids(e.student_id for e in enrollments)
    result = []
    for e in enrollments:
        student = students.get(e.student_id)
        result.append({
            "id": e.id,
            "studentId": e.student_id,
            "courseId": e.course_id,
            "studentName": student.name if student else None,
            "studentEmail": student.email if student else None,
            "createdAt": e.created_at,
        })
    return result


# --- Lectures ---

def create_lecture(lecture_data: course_model.LectureCreate, db: DatabaseService) -> Dict:
    if not lecture_data.courseId or not lecture_data.title or not lecture_data.videoUrl:
        raise errors.ValidationError("Please provide courseId, title, and videoUrl")

    lecture = db.add_lecture({
        "id": f"lec_{uuid.uuid4().hex[:12]}",
        "course_id": lecture_data.courseId,
        "title": lecture_data.title,
        "video_url": lecture_data.videoUrl,
        "order": lecture_data.order if lecture_data.order is not None else 1,
    })
    logger.info("Lecture %s added to course %s", lecture.id, lecture.course_id)
    return _lecture_to_dict(lecture)


def list_course_lectures(course_id: str, db: DatabaseService) -> List[Dict]:
    return [_lecture_to_dict(l) for l in db.get_lectures_by_course(course_id)]
