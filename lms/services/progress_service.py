# /lms/services/progress_service.py

"""
The progress aggregator.

A student's standing in a course is assembled from three independent
sources on every call: watch-time rows (lectures), test results (quizzes)
and assignment submissions. Nothing is cached or stored as a summary.

Completion is defined by lectures watched alone. Quiz and assignment figures
are reported next to it but never move `completionPercent`.

A separate, older ledger of explicit "mark lecture complete" rows backs
`mark_lecture_complete` and `get_course_progress`; it does not feed the
summary either.
"""

import logging
import uuid
from typing import Dict

from ..core import errors
from .database_service import DatabaseService
from .progress_helpers import calculations

logger = logging.getLogger(__name__)


# --- Mark-complete ledger ---

def mark_lecture_complete(student_id: str, course_id: str, lecture_id: str, db: DatabaseService) -> Dict:
    """Appends a completion row. Repeated calls append repeated rows."""
    if not course_id or not lecture_id:
        raise errors.ValidationError("Please provide courseId and lectureId")

    progress = db.add_progress({
        "id": f"prg_{uuid.uuid4().hex[:12]}",
        "student_id": student_id,
        "course_id": course_id,
        "lecture_id": lecture_id,
        "completed": True,
    })
    logger.info("Lecture %s marked complete by student %s", lecture_id, student_id)
    return {
        "studentId": progress.student_id,
        "courseId": progress.course_id,
        "lectureId": progress.lecture_id,
        "completed": progress.completed,
    }


def get_course_progress(student_id: str, course_id: str, db: DatabaseService) -> Dict:
    lecture_ids = set(db.get_lecture_ids_by_course(course_id))
    completed = [lid for lid in db.get_completed_lecture_ids(student_id, course_id) if lid in lecture_ids]

    total = len(lecture_ids)
    return {
        "courseId": course_id,
        "studentId": student_id,
        "totalLectures": total,
        "completedLectures": len(completed),
        "progressPercentage": calculations.completion_percent(total, len(completed)),
    }


# --- Progress summary ---

def get_progress_summary(student_id: str, course_id: str, db: DatabaseService) -> Dict:
    """
    Builds the progress summary for one student in one course.

    An unknown course is not an error here: it has no lectures, tests or
    assignments, so every figure is zero and the quiz average is None.

    Returns:
        {courseId, studentId, lectures: {total, watched},
         quizzes: {averageScore, attempted}, assignments: {submitted, graded},
         completionPercent}
    """
    if not course_id:
        raise errors.ValidationError("Course ID is required")

    # 1. Lectures: existence of a watch-time row is "watched".
    lecture_ids = db.get_lecture_ids_by_course(course_id)
    lectures_total = len(lecture_ids)
    lectures_watched = db.count_watched_lectures(student_id, lecture_ids)

    # 2. Quizzes: every attempt counts, retakes included.
    test_ids = db.get_test_ids_by_course(course_id)
    results = db.get_results_for_student(student_id, test_ids=test_ids)
    quiz_average = calculations.average_score(r.score for r in results)

    # 3. Assignments.
    assignment_ids = db.get_assignment_ids_by_courses([course_id])
    submissions = db.get_submissions_for_student(student_id, assignment_ids)
    graded = sum(1 for s in submissions if s.marks is not None)

    completion = calculations.completion_percent(lectures_total, lectures_watched)
    logger.info(
        "Progress summary for student %s in course %s: %d/%d lectures, %d%% complete",
        student_id, course_id, lectures_watched, lectures_total, completion,
    )

    return {
        "courseId": course_id,
        "studentId": student_id,
        "lectures": {"total": lectures_total, "watched": lectures_watched},
        "quizzes": {"averageScore": quiz_average, "attempted": len(results)},
        "assignments": {"submitted": len(submissions), "graded": graded},
        "completionPercent": completion,
    }
