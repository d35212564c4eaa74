# /lms/db/models/progress_models.py

from sqlalchemy import Column, String, Float, Boolean, DateTime, UniqueConstraint

from ..base_class import Base, utcnow


class WatchTime(Base):
    """
    Last known playback position for one (student, lecture) pair.

    The mere existence of a row marks the lecture as watched for completion
    purposes, whatever `current_time` holds.
    """
    __table_args__ = (
        UniqueConstraint("student_id", "lecture_id", name="uq_watchtime_student_lecture"),
    )

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, index=True, nullable=False)
    lecture_id = Column(String, index=True, nullable=False)
    current_time = Column("position_seconds", Float, nullable=False, default=0)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class Progress(Base):
    """
    One row per "mark complete" click. Rows are NOT deduplicated; readers
    count distinct lecture ids.
    """
    __tablename__ = "progress"  # Override automatic pluralization

    id = Column(String, primary_key=True, index=True)
    student_id = Column(String, index=True, nullable=False)
    course_id = Column(String, index=True, nullable=False)
    lecture_id = Column(String, index=True, nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
