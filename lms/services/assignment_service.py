# /lms/services/assignment_service.py

"""
Business logic for written assignments: authoring, one-shot student
submission, and teacher grading.

A student submits exactly once per assignment; there is no resubmission.
Grading can be repeated and simply overwrites the previous grade.
"""

import logging
import math
import numbers
import uuid
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from ..core import errors
from ..db.base_class import utcnow
from ..models import assignment_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

_datetime_adapter = TypeAdapter(datetime)
_date_adapter = TypeAdapter(date)


def parse_due_date(value: Any) -> datetime:
    """
    Accepts an ISO-8601 date-time or a bare date. A naive value is taken to
    be UTC; a bare date means midnight UTC.
    """
    try:
        parsed = _datetime_adapter.validate_python(value)
    except PydanticValidationError:
        try:
            day = _date_adapter.validate_python(value)
        except PydanticValidationError:
            raise errors.ValidationError("Due date must be a valid date")
        parsed = datetime(day.year, day.month, day.day)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _submission_to_dict(submission, student=None) -> Dict:
    data = {
        "id": submission.id,
        "assignmentId": submission.assignment_id,
        "studentId": submission.student_id,
        "answerText": submission.answer_text,
        "marks": submission.marks,
        "feedback": submission.feedback,
        "status": submission.status,
        "submittedAt": submission.submitted_at,
        "evaluatedAt": submission.evaluated_at,
        "gradedAt": submission.graded_at,
    }
    if student is not None:
        data["studentName"] = student.name
        data["studentEmail"] = student.email
    return data


# --- Authoring ---

def create_assignment(assignment_data: assignment_model.AssignmentCreate, db: DatabaseService, teacher_id: str) -> str:
    if not assignment_data.title:
        raise errors.ValidationError("Title is required")
    if not assignment_data.description:
        raise errors.ValidationError("Description is required")
    if not assignment_data.courseId:
        raise errors.ValidationError("Course ID is required")
    if not assignment_data.dueDate:
        raise errors.ValidationError("Due date is required")

    assignment = db.add_assignment({
        "id": f"asg_{uuid.uuid4().hex[:12]}",
        "title": assignment_data.title,
        "description": assignment_data.description,
        "course_id": assignment_data.courseId,
        "created_by": teacher_id,
        "due_date": parse_due_date(assignment_data.dueDate),
    })
    logger.info("Assignment %s created in course %s", assignment.id, assignment.course_id)
    return assignment.id


def list_course_assignments(course_id: str, db: DatabaseService) -> List[Dict]:
    """A course's assignments, earliest due date first, with the authoring teacher's name."""
    assignments = db.get_assignments_by_course(course_id)
    teachers = db.get_users_by_ids(a.created_by for a in assignments)
    return [
        {
            "id": a.id,
            "title": a.title,
            "description": a.description,
            "courseId": a.course_id,
            "createdBy": a.created_by,
            "teacherName": teachers[a.created_by].name if a.created_by in teachers else None,
            "dueDate": a.due_date,
            "createdAt": a.created_at,
        }
        for a in assignments
    ]


# --- Submission ---

def submit_assignment(submit_data: assignment_model.AssignmentSubmit, db: DatabaseService, student_id: str) -> str:
    if not submit_data.assignmentId:
        raise errors.ValidationError("Assignment ID is required")
    if not submit_data.answerText:
        raise errors.ValidationError("Answer text is required")

    if db.get_assignment_by_id(submit_data.assignmentId) is None:
        raise errors.NotFoundError("Assignment not found")

    if db.get_submission(submit_data.assignmentId, student_id) is not None:
        raise errors.ConflictError("You have already submitted this assignment")

    submission = db.add_submission({
        "id": f"sub_{uuid.uuid4().hex[:12]}",
        "assignment_id": submit_data.assignmentId,
        "student_id": student_id,
        "answer_text": submit_data.answerText,
        "status": assignment_model.SubmissionStatus.SUBMITTED.value,
    })
    if submission is None:
        raise errors.ConflictError("You have already submitted this assignment")

    logger.info("Student %s submitted assignment %s", student_id, submit_data.assignmentId)
    return submission.id


# --- Grading ---

def _validate_marks(marks: Any) -> float:
    if marks is None:
        raise errors.ValidationError("Marks are required")
    if isinstance(marks, bool) or not isinstance(marks, numbers.Real) or not math.isfinite(marks):
        raise errors.ValidationError("Marks must be a number")
    if marks < 0:
        raise errors.ValidationError("Marks cannot be negative")
    return float(marks)


def grade_submission(submission_id: str, marks: Any, db: DatabaseService, feedback: Optional[str] = None) -> Dict:
    """
    Records a grade. The submission becomes `checked`; `gradedAt` and
    `evaluatedAt` receive the same timestamp. Feedback is only replaced when
    a non-empty value is given. Grading an already graded submission
    overwrites it.
    """
    value = _validate_marks(marks)

    if db.get_submission_by_id(submission_id) is None:
        raise errors.NotFoundError("Submission not found")

    submission = db.update_submission_grade(
        submission_id,
        marks=value,
        feedback=feedback,
        status=assignment_model.SubmissionStatus.CHECKED.value,
        graded_at=utcnow(),
    )
    logger.info("Submission %s graded with %s marks", submission_id, value)
    return _submission_to_dict(submission)


def evaluate_submission(evaluate_data: assignment_model.EvaluateRequest, db: DatabaseService) -> Dict:
    if not evaluate_data.submissionId:
        raise errors.ValidationError("Submission ID is required")
    return grade_submission(evaluate_data.submissionId, evaluate_data.marks, db)


# --- Lookups ---

def get_submission(submission_id: str, db: DatabaseService) -> Dict:
    submission = db.get_submission_by_id(submission_id)
    if submission is None:
        raise errors.NotFoundError("Submission not found")
    return _submission_to_dict(submission, db.get_user_by_id(submission.student_id))


def get_my_submission(assignment_id: str, student_id: str, db: DatabaseService) -> Optional[Dict]:
    """The student's own submission, or None when they have not submitted."""
    submission = db.get_submission(assignment_id, student_id)
    return _submission_to_dict(submission) if submission else None


def list_submissions_for_assignment(assignment_id: str, db: DatabaseService) -> List[Dict]:
    submissions = db.get_submissions_by_assignment(assignment_id)
    students = db.get_users_by_ids(s.student_id for s in submissions)
    return [_submission_to_dict(s, students.get(s.student_id)) for s in submissions]
