# /lms/db/models/course_models.py

"""
This module defines the SQLAlchemy ORM models for `Course`, `Enrollment` and
`Lecture`.

References are opaque string ids without database-level foreign keys, so a
lecture may outlive its course and an enrollment may outlive its student.
Aggregation code filters such orphans out instead of relying on cascades.
"""

from sqlalchemy import Column, String, Integer, DateTime, UniqueConstraint

from ..base_class import Base, utcnow


class Course(Base):
    """A course owned by a single teacher."""
    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    teacher_id = Column(String, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class Enrollment(Base):
    """
    Bridge between a student and a course.

    The service checks for an existing row before inserting; the unique
    constraint catches the concurrent request that slips between the check
    and the insert.
    """
    __table_args__ = (
        UniqueConstraint("student_id", "course_id", name="uq_enrollment_student_course"),
    )

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, index=True, nullable=False)
    course_id = Column(String, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class Lecture(Base):
    id = Column(String, primary_key=True, index=True)
    course_id = Column(String, index=True, nullable=False)
    title = Column(String, nullable=False)
    video_url = Column(String, nullable=False)
    # Display hint only; duplicates are allowed.
    order = Column(Integer, nullable=False, default=1)
