# /lms/services/admin_service.py

"""
Read-side counts and user management for the admin console.

The per-course tallies (enrollments per course, courses per teacher) are
built with pandas group-bys over the flat rows rather than one count query
per course.
"""

import logging
import uuid
from typing import Dict, List

import pandas as pd

from ..core import errors, security
from ..models import user_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

UNKNOWN_STUDENT = "Unknown Student"
UNKNOWN_COURSE = "Unknown Course"
UNKNOWN_TEACHER = "Unknown Teacher"
MISSING = "N/A"

_VALID_ROLES = {r.value for r in user_model.Role}


def _user_to_dict(user) -> Dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "createdAt": user.created_at,
    }


def _count_by(values: List[str], column: str) -> pd.Series:
    """Occurrences of each distinct value, as a Series indexed by value."""
    frame = pd.DataFrame({column: values}, dtype="object")
    return frame.groupby(column).size()


# --- Read-side aggregates ---

def get_stats(admin_id: str, db: DatabaseService) -> Dict:
    stats = {
        "adminId": admin_id,
        "totalUsers": db.count_users(),
        "totalStudents": db.count_users(role=user_model.Role.STUDENT.value),
        "totalTeachers": db.count_users(role=user_model.Role.TEACHER.value),
        "totalCourses": db.count_courses(),
        "totalEnrollments": db.count_enrollments(),
    }
    logger.info("Admin stats for %s: %s", admin_id, stats)
    return stats


def list_users(db: DatabaseService) -> List[Dict]:
    """Every user, newest first. Password hashes never leave this function."""
    return [_user_to_dict(u) for u in db.get_all_users()]


def list_teachers(db: DatabaseService) -> List[Dict]:
    teachers = db.get_all_users(role=user_model.Role.TEACHER.value)
    course_counts = _count_by([c.teacher_id for c in db.get_all_courses()], "teacher_id")
    return [
        {
            "id": t.id,
            "name": t.name,
            "email": t.email,
            "courseCount": int(course_counts.get(t.id, 0)),
            "createdAt": t.created_at,
        }
        for t in teachers
    ]


def list_courses(db: DatabaseService) -> List[Dict]:
    courses = db.get_all_courses()
    teachers = db.get_users_by_ids(c.teacher_id for c in courses)
    result = []
    for c in courses:
        teacher = teachers.get(c.teacher_id)
        result.append({
            "id": c.id,
            "title": c.title,
            "description": c.description,
            "teacherId": c.teacher_id,
            "teacherName": teacher.name if teacher else UNKNOWN_TEACHER,
            "teacherEmail": teacher.email if teacher else MISSING,
            "createdAt": c.created_at,
        })
    return result


def get_enrollment_overview(db: DatabaseService) -> Dict:
    """
    Two views of the enrollment table: one row per enrollment with the
    student and course names resolved, and one row per course with its
    number of enrolled students (courses with none included).
    """
    enrollments = db.get_all_enrollments()
    students = db.get_users_by_ids(e.student_id for e in enrollments)
    courses = db.get_all_courses()
    course_map = {c.id: c for c in courses}

    by_student = []
    for e in enrollments:
        student = students.get(e.student_id)
        course = course_map.get(e.course_id)
        by_student.append({
            "id": e.id,
            "studentId": e.student_id,
            "studentName": student.name if student else UNKNOWN_STUDENT,
            "studentEmail": student.email if student else MISSING,
            "courseId": e.course_id,
            "courseName": course.title if course else UNKNOWN_COURSE,
            "createdAt": e.created_at,
        })

    counts = _count_by([e.course_id for e in enrollments], "course_id")
    by_course = [
        {"courseId": c.id, "courseName": c.title, "studentCount": int(counts.get(c.id, 0))}
        for c in courses
    ]

    logger.info("Enrollment overview: %d enrollments across %d courses", len(enrollments), len(courses))
    return {
        "totalEnrollments": len(enrollments),
        "enrollmentsByStudents": by_student,
        "enrollmentsByCourse": by_course,
    }


# --- User management ---

def create_admin(admin_data: user_model.AdminCreate, db: DatabaseService) -> Dict:
    if not admin_data.name or not admin_data.email or not admin_data.password:
        raise errors.ValidationError("Name, email, and password are required")

    if db.get_user_by_email(admin_data.email) is not None:
        raise errors.ConflictError("Email already registered")

    admin = db.add_user({
        "id": f"usr_{uuid.uuid4().hex[:12]}",
        "name": admin_data.name,
        "email": admin_data.email,
        "password": security.hash_password(admin_data.password),
        "role": user_model.Role.ADMIN.value,
        "email_verified": True,
        "auth_provider": user_model.AuthProvider.LOCAL.value,
    })
    if admin is None:
        raise errors.ConflictError("Email already registered")

    logger.info("Admin user %s created", admin.id)
    return _user_to_dict(admin)


def change_role(user_id: str, role: str, db: DatabaseService) -> Dict:
    if not role:
        raise errors.ValidationError("Role is required")
    if role not in _VALID_ROLES:
        raise errors.ValidationError("Invalid role. Must be student, teacher, or admin")

    user = db.update_user_role(user_id, role)
    if user is None:
        raise errors.NotFoundError("User not found")

    logger.info("User %s role changed to %s", user_id, role)
    return _user_to_dict(user)


def delete_user(user_id: str, admin_id: str, db: DatabaseService) -> Dict:
    """
    Removes a user record. Their courses, enrollments and results are left
    in place as orphans. An admin cannot delete their own account.
    """
    if user_id == admin_id:
        raise errors.ValidationError("Cannot delete your own admin account")

    deleted = db.delete_user(user_id)
    if deleted is None:
        raise errors.NotFoundError("User not found")

    logger.info("User %s deleted by admin %s", user_id, admin_id)
    return deleted
