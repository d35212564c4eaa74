# /lms/services/database_helpers/course_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Course,
Enrollment and Lecture tables.

Enrollment inserts are guarded by a unique constraint on
(student_id, course_id). When a concurrent request wins the race between the
service's existence check and this insert, the IntegrityError is rolled back
and `add_enrollment` returns None so the caller can report a conflict.
"""

from typing import List, Dict, Optional, Iterable
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lms.db.models.course_models import Course, Enrollment, Lecture


class CourseRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Course Methods ---

    def add_course(self, record: Dict) -> Course:
        new_course = Course(**record)
        self.db.add(new_course)
        self.db.commit()
        self.db.refresh(new_course)
        return new_course

    def get_course_by_id(self, course_id: str) -> Optional[Course]:
        return self.db.query(Course).filter(Course.id == course_id).first()

    def get_courses_by_ids(self, course_ids: Iterable[str]) -> Dict[str, Course]:
        ids = list({cid for cid in course_ids if cid})
        if not ids:
            return {}
        return {c.id: c for c in self.db.query(Course).filter(Course.id.in_(ids)).all()}

    def get_all_courses(self) -> List[Course]:
        """Retrieves every course, newest first."""
        return self.db.query(Course).order_by(Course.created_at.desc()).all()

    def get_courses_by_teacher(self, teacher_id: str) -> List[Course]:
        return (
            self.db.query(Course)
            .filter(Course.teacher_id == teacher_id)
            .order_by(Course.created_at.desc())
            .all()
        )

    def count_courses(self, teacher_id: Optional[str] = None) -> int:
        query = self.db.query(func.count(Course.id))
        if teacher_id is not None:
            query = query.filter(Course.teacher_id == teacher_id)
        return query.scalar() or 0

    # --- Enrollment Methods ---

    def get_enrollment(self, student_id: str, course_id: str) -> Optional[Enrollment]:
        return (
            self.db.query(Enrollment)
            .filter(Enrollment.student_id == student_id, Enrollment.course_id == course_id)
            .first()
        )

    def add_enrollment(self, record: Dict) -> Optional[Enrollment]:
        """
        Inserts an enrollment. Returns None if the unique constraint rejects
        it, i.e. the student got enrolled by a concurrent request.
        """
        new_enrollment = Enrollment(**record)
        self.db.add(new_enrollment)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            return None
        self.db.refresh(new_enrollment)
        return new_enrollment

    def get_enrollments_by_student(self, student_id: str) -> List[Enrollment]:
        return (
            self.db.query(Enrollment)
            .filter(Enrollment.student_id == student_id)
            .order_by(Enrollment.created_at.asc())
            .all()
        )

    def get_enrollments_by_course(self, course_id: str) -> List[Enrollment]:
        """Retrieves the enrollments of one course, newest first."""
        return (
            self.db.query(Enrollment)
            .filter(Enrollment.course_id == course_id)
            .order_by(Enrollment.created_at.desc())
            .all()
        )

    def get_enrollments_for_courses(self, course_ids: Iterable[str]) -> List[Enrollment]:
        ids = list(course_ids)
        if not ids:
            return []
        return self.db.query(Enrollment).filter(Enrollment.course_id.in_(ids)).all()

    def get_all_enrollments(self) -> List[Enrollment]:
        return self.db.query(Enrollment).order_by(Enrollment.created_at.desc()).all()

    def count_enrollments(self) -> int:
        return self.db.query(func.count(Enrollment.id)).scalar() or 0

    # --- Lecture Methods ---

    def add_lecture(self, record: Dict) -> Lecture:
        new_lecture = Lecture(**record)
        self.db.add(new_lecture)
        self.db.commit()
        self.db.refresh(new_lecture)
        return new_lecture

    def get_lectures_by_course(self, course_id: str) -> List[Lecture]:
        """Retrieves a course's lectures in display order."""
        return (
            self.db.query(Lecture)
            .filter(Lecture.course_id == course_id)
            .order_by(Lecture.order.asc())
            .all()
        )

    def get_lecture_ids_by_course(self, course_id: str) -> List[str]:
        rows = self.db.query(Lecture.id).filter(Lecture.course_id == course_id).all()
        return [row.id for row in rows]
