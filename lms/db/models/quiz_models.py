# /lms/db/models/quiz_models.py

"""
This module defines the SQLAlchemy ORM models for the quiz engine: `Test`,
its `Question`s, and the `TestResult` recorded for every submission attempt.
"""

from sqlalchemy import Column, String, Integer, JSON, DateTime

from ..base_class import Base, utcnow


class Test(Base):
    # Keep pytest from collecting this model when a test module imports it.
    __test__ = False

    id = Column(String, primary_key=True, index=True)
    title = Column(String, nullable=False)
    course_id = Column(String, index=True, nullable=False)
    created_by = Column(String, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)


class Question(Base):
    """
    A multiple-choice question. `options` is an ordered JSON list of strings
    and `correct_answer` is validated to be one of them when the question is
    created; it is never sent to a student before submission.
    """
    id = Column(String, primary_key=True, index=True)
    test_id = Column(String, index=True, nullable=False)
    question_text = Column(String, nullable=False)
    options = Column(JSON, nullable=False)
    correct_answer = Column(String, nullable=False)


class TestResult(Base):
    """
    One graded attempt. Multiple attempts per student are allowed.

    `answers` is a JSON list of {questionId, selectedAnswer, isCorrect}
    captured at submission time.
    """
    __test__ = False

    id = Column(String, primary_key=True, index=True)
    test_id = Column(String, index=True, nullable=False)
    student_id = Column(String, index=True, nullable=False)
    score = Column(Integer, nullable=False)
    answers = Column(JSON, nullable=False)
    submitted_at = Column(DateTime(timezone=True), default=utcnow)
