# /lms/db/models/assignment_models.py

"""
This module defines the SQLAlchemy ORM models for the `Assignment` and
`AssignmentSubmission` entities, which represent teacher-authored written
tasks and each student's single answer to them.
"""

from sqlalchemy import Column, String, Float, DateTime, UniqueConstraint

from ..base_class import Base, utcnow


class Assignment(Base):
    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    course_id = Column(String, index=True, nullable=False)
    created_by = Column(String, index=True, nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class AssignmentSubmission(Base):
    """
    A student's answer to an assignment.

    Status moves one way, `submitted` -> `checked`, when a teacher grades it.
    `marks` stays NULL until then; a NULL mark is what "pending" means to the
    dashboards. `evaluated_at` is kept in step with `graded_at` for older
    clients that still read it.
    """
    __table_args__ = (
        UniqueConstraint("assignment_id", "student_id", name="uq_submission_assignment_student"),
    )

    id = Column(String, primary_key=True, index=True)
    assignment_id = Column(String, index=True, nullable=False)
    student_id = Column(String, index=True, nullable=False)
    answer_text = Column(String, nullable=False)
    marks = Column(Float, nullable=True)
    feedback = Column(String, nullable=True)
    status = Column(String, index=True, nullable=False, default="submitted")
    submitted_at = Column(DateTime(timezone=True), default=utcnow)
    evaluated_at = Column(DateTime(timezone=True), nullable=True)
    graded_at = Column(DateTime(timezone=True), nullable=True)
