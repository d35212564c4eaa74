# /lms/services/database_helpers/assignment_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Assignment and
AssignmentSubmission tables.

Submission inserts are guarded by a unique constraint on
(assignment_id, student_id); `add_submission` returns None when it fires so
the service can report the duplicate the same way as its own pre-check.
"""

from datetime import datetime
from typing import List, Dict, Optional, Iterable
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lms.db.models.assignment_models import Assignment, AssignmentSubmission


class AssignmentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Assignment Methods ---

    def add_assignment(self, record: Dict) -> Assignment:
        new_assignment = Assignment(**record)
        self.db.add(new_assignment)
        self.db.commit()
        self.db.refresh(new_assignment)
        return new_assignment

    def get_assignment_by_id(self, assignment_id: str) -> Optional[Assignment]:
        return self.db.query(Assignment).filter(Assignment.id == assignment_id).first()

    def get_assignments_by_course(self, course_id: str) -> List[Assignment]:
        """Retrieves a course's assignments, earliest due date first."""
        return (
            self.db.query(Assignment)
            .filter(Assignment.course_id == course_id)
            .order_by(Assignment.due_date.asc())
            .all()
        )

    def get_assignment_ids_by_courses(self, course_ids: Iterable[str]) -> List[str]:
        ids = list(course_ids)
        if not ids:
            return []
        rows = self.db.query(Assignment.id).filter(Assignment.course_id.in_(ids)).all()
        return [row.id for row in rows]

    def get_assignment_ids_by_creator(self, teacher_id: str) -> List[str]:
        rows = self.db.query(Assignment.id).filter(Assignment.created_by == teacher_id).all()
        return [row.id for row in rows]

    # --- Submission Methods ---

    def add_submission(self, record: Dict) -> Optional[AssignmentSubmission]:
        new_submission = AssignmentSubmission(**record)
        self.db.add(new_submission)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return None
        self.db.refresh(new_submission)
        return new_submission

    def get_submission_by_id(self, submission_id: str) -> Optional[AssignmentSubmission]:
        return self.db.query(AssignmentSubmission).filter(AssignmentSubmission.id == submission_id).first()

    def get_submission(self, assignment_id: str, student_id: str) -> Optional[AssignmentSubmission]:
        return (
            self.db.query(AssignmentSubmission)
            .filter(
                AssignmentSubmission.assignment_id == assignment_id,
                AssignmentSubmission.student_id == student_id,
            )
            .first()
        )

    def get_submissions_by_assignment(self, assignment_id: str) -> List[AssignmentSubmission]:
        """Retrieves every submission for an assignment, newest first."""
        return (
            self.db.query(AssignmentSubmission)
            .filter(AssignmentSubmission.assignment_id == assignment_id)
            .order_by(AssignmentSubmission.submitted_at.desc())
            .all()
        )

    def get_submissions_for_student(self, student_id: str, assignment_ids: Iterable[str]) -> List[AssignmentSubmission]:
        ids = list(assignment_ids)
        if not ids:
            return []
        return (
            self.db.query(AssignmentSubmission)
            .filter(
                AssignmentSubmission.student_id == student_id,
                AssignmentSubmission.assignment_id.in_(ids),
            )
            .all()
        )

    def count_ungraded_submissions(self, assignment_ids: Iterable[str], student_id: Optional[str] = None) -> int:
        """Counts submissions with no marks yet among the given assignments."""
        ids = list(assignment_ids)
        if not ids:
            return 0
        query = self.db.query(func.count(AssignmentSubmission.id)).filter(
            AssignmentSubmission.assignment_id.in_(ids),
            AssignmentSubmission.marks.is_(None),
        )
        if student_id is not None:
            query = query.filter(AssignmentSubmission.student_id == student_id)
        return query.scalar() or 0

    def update_submission_grade(
        self,
        submission_id: str,
        marks: float,
        feedback: Optional[str],
        status: str,
        graded_at: datetime,
    ) -> Optional[AssignmentSubmission]:
        """
        Writes a grade. `feedback` is only overwritten when a value is given;
        `graded_at` is written to both timestamp columns.
        """
        submission = self.get_submission_by_id(submission_id)
        if submission:
            submission.marks = marks
            if feedback:
                submission.feedback = feedback
            submission.status = status
            submission.graded_at = graded_at
            submission.evaluated_at = graded_at
            self.db.commit()
            self.db.refresh(submission)
        return submission
