# /lms/services/dashboard_service.py

# --- Core Imports ---
import logging

# Import the Pydantic models to ensure our output matches the data contract.
from ..models.dashboard_model import StudentDashboard, TeacherDashboard
from .database_service import DatabaseService
from .progress_helpers import calculations

logger = logging.getLogger(__name__)

# --- Core Public Functions ---

def get_student_dashboard(student_id: str, db: DatabaseService) -> StudentDashboard:
    """
    Calculates the student's home-page cards. Every figure is recomputed from
    the records on each call.

    Args:
        student_id: The authenticated student.
        db: An instance of the DatabaseService, provided by dependency injection.

    Returns:
        A StudentDashboard Pydantic object.
    """
    # 1. Enrollments drive the course-scoped counts below.
    enrollments = db.get_enrollments_by_student(student_id)
    course_ids = [e.course_id for e in enrollments]

    # 2. Quiz average spans every attempt the student has made, in any course.
    results = db.get_results_for_student(student_id)
    average_quiz_score = calculations.average_score(r.score for r in results)

    # 3. Pending = the student's own submissions still waiting for marks.
    assignment_ids = db.get_assignment_ids_by_courses(course_ids)
    pending = db.count_ungraded_submissions(assignment_ids, student_id=student_id)

    logger.info(
        "Student dashboard for %s: %d courses, %d pending assignments",
        student_id, len(enrollments), pending,
    )
    return StudentDashboard(
        studentId=student_id,
        totalEnrolledCourses=len(enrollments),
        completedCourses=0,
        averageQuizScore=average_quiz_score,
        pendingAssignments=pending,
    )


def get_teacher_dashboard(teacher_id: str, db: DatabaseService) -> TeacherDashboard:
    """Calculates the teacher's home-page cards."""
    courses = db.get_courses_by_teacher(teacher_id)
    enrollments = db.get_enrollments_for_courses(c.id for c in courses)
    unique_students = {e.student_id for e in enrollments}

    own_assignment_ids = db.get_assignment_ids_by_creator(teacher_id)
    pending = db.count_ungraded_submissions(own_assignment_ids)

    logger.info(
        "Teacher dashboard for %s: %d courses, %d students, %d pending submissions",
        teacher_id, len(courses), len(unique_students), pending,
    )
    return TeacherDashboard(
        teacherId=teacher_id,
        totalCoursesCreated=len(courses),
        totalStudentsEnrolled=len(unique_students),
        pendingSubmissions=pending,
        totalQuizzesCreated=db.count_tests_by_creator(teacher_id),
    )
