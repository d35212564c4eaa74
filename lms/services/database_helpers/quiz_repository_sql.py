# /lms/services/database_helpers/quiz_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Test, Question
and TestResult tables.
"""

from typing import List, Dict, Optional, Iterable
from sqlalchemy import func
from sqlalchemy.orm import Session

from lms.db.models.quiz_models import Test, Question, TestResult


class QuizRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Test Methods ---

    def add_test(self, record: Dict) -> Test:
        new_test = Test(**record)
        self.db.add(new_test)
        self.db.commit()
        self.db.refresh(new_test)
        return new_test

    def get_test_by_id(self, test_id: str) -> Optional[Test]:
        return self.db.query(Test).filter(Test.id == test_id).first()

    def get_tests_by_course(self, course_id: str) -> List[Test]:
        return (
            self.db.query(Test)
            .filter(Test.course_id == course_id)
            .order_by(Test.created_at.asc())
            .all()
        )

    def get_test_ids_by_course(self, course_id: str) -> List[str]:
        rows = self.db.query(Test.id).filter(Test.course_id == course_id).all()
        return [row.id for row in rows]

    def count_tests_by_creator(self, teacher_id: str) -> int:
        return self.db.query(func.count(Test.id)).filter(Test.created_by == teacher_id).scalar() or 0

    # --- Question Methods ---

    def add_question(self, record: Dict) -> Question:
        new_question = Question(**record)
        self.db.add(new_question)
        self.db.commit()
        self.db.refresh(new_question)
        return new_question

    def get_questions_by_test(self, test_id: str) -> List[Question]:
        return self.db.query(Question).filter(Question.test_id == test_id).all()

    # --- Test Result Methods ---

    def add_test_result(self, record: Dict) -> TestResult:
        """Inserts a new attempt. Attempts are never merged or capped."""
        new_result = TestResult(**record)
        self.db.add(new_result)
        self.db.commit()
        self.db.refresh(new_result)
        return new_result

    def get_results_by_test(self, test_id: str) -> List[TestResult]:
        """Retrieves every attempt at a test, newest first."""
        return (
            self.db.query(TestResult)
            .filter(TestResult.test_id == test_id)
            .order_by(TestResult.submitted_at.desc())
            .all()
        )

    def get_results_for_student(self, student_id: str, test_ids: Optional[Iterable[str]] = None) -> List[TestResult]:
        """
        Retrieves a student's attempts. When `test_ids` is given the query is
        restricted to those tests (an empty collection yields no rows).
        """
        query = self.db.query(TestResult).filter(TestResult.student_id == student_id)
        if test_ids is not None:
            ids = list(test_ids)
            if not ids:
                return []
            query = query.filter(TestResult.test_id.in_(ids))
        return query.all()
