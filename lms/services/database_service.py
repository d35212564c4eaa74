# /lms/services/database_service.py

from typing import List, Dict, Optional, Generator, Iterable, Tuple
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from lms.db.database import get_db

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.course_repository_sql import CourseRepositorySQL
from .database_helpers.progress_repository_sql import ProgressRepositorySQL
from .database_helpers.quiz_repository_sql import QuizRepositorySQL
from .database_helpers.assignment_repository_sql import AssignmentRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Initializes the DatabaseService with one SQL repository per aggregate.
        Services only ever talk to this facade, never to a repository or the
        session directly.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.session = db_session
        self.user_repo = UserRepositorySQL(db_session)
        self.course_repo = CourseRepositorySQL(db_session)
        self.progress_repo = ProgressRepositorySQL(db_session)
        self.quiz_repo = QuizRepositorySQL(db_session)
        self.assignment_repo = AssignmentRepositorySQL(db_session)

    # --- USER METHODS (DELEGATED) ---
    def add_user(self, record: Dict): return self.user_repo.add_user(record)
    def get_user_by_id(self, user_id: str): return self.user_repo.get_user_by_id(user_id)
    def get_user_by_email(self, email: str): return self.user_repo.get_user_by_email(email)
    def get_users_by_ids(self, user_ids: Iterable[str]) -> Dict: return self.user_repo.get_users_by_ids(user_ids)
    def get_all_users(self, role: Optional[str] = None) -> List: return self.user_repo.get_all_users(role=role)
    def count_users(self, role: Optional[str] = None) -> int: return self.user_repo.count_users(role=role)
    def update_user_role(self, user_id: str, role: str): return self.user_repo.update_user_role(user_id, role)
    def delete_user(self, user_id: str) -> Optional[Dict]: return self.user_repo.delete_user(user_id)

    # --- COURSE, ENROLLMENT & LECTURE METHODS (DELEGATED) ---
    def add_course(self, record: Dict): return self.course_repo.add_course(record)
    def get_course_by_id(self, course_id: str): return self.course_repo.get_course_by_id(course_id)
    def get_courses_by_ids(self, course_ids: Iterable[str]) -> Dict: return self.course_repo.get_courses_by_ids(course_ids)
    def get_all_courses(self) -> List: return self.course_repo.get_all_courses()
    def get_courses_by_teacher(self, teacher_id: str) -> List: return self.course_repo.get_courses_by_teacher(teacher_id)
    def count_courses(self, teacher_id: Optional[str] = None) -> int: return self.course_repo.count_courses(teacher_id=teacher_id)
    def get_enrollment(self, student_id: str, course_id: str): return self.course_repo.get_enrollment(student_id, course_id)
    def add_enrollment(self, record: Dict): return self.course_repo.add_enrollment(record)
    def get_enrollments_by_student(self, student_id: str) -> List: return self.course_repo.get_enrollments_by_student(student_id)
    def get_enrollments_by_course(self, course_id: str) -> List: return self.course_repo.get_enrollments_by_course(course_id)
    def get_enrollments_for_courses(self, course_ids: Iterable[str]) -> List: return self.course_repo.get_enrollments_for_courses(course_ids)
    def get_all_enrollments(self) -> List: return self.course_repo.get_all_enrollments()
    def count_enrollments(self) -> int: return self.course_repo.count_enrollments()
    def add_lecture(self, record: Dict): return self.course_repo.add_lecture(record)
    def get_lectures_by_course(self, course_id: str) -> List: return self.course_repo.get_lectures_by_course(course_id)
    def get_lecture_ids_by_course(self, course_id: str) -> List[str]: return self.course_repo.get_lecture_ids_by_course(course_id)

    # --- WATCH TIME & PROGRESS METHODS (DELEGATED) ---
    def get_watch_time(self, student_id: str, lecture_id: str): return self.progress_repo.get_watch_time(student_id, lecture_id)
    def upsert_watch_time(self, record: Dict) -> Tuple: return self.progress_repo.upsert_watch_time(record)
    def count_watched_lectures(self, student_id: str, lecture_ids: Iterable[str]) -> int: return self.progress_repo.count_watched_lectures(student_id, lecture_ids)
    def add_progress(self, record: Dict): return self.progress_repo.add_progress(record)
    def get_completed_lecture_ids(self, student_id: str, course_id: str) -> List[str]: return self.progress_repo.get_completed_lecture_ids(student_id, course_id)

    # --- QUIZ METHODS (DELEGATED) ---
    def add_test(self, record: Dict): return self.quiz_repo.add_test(record)
    def get_test_by_id(self, test_id: str): return self.quiz_repo.get_test_by_id(test_id)
    def get_tests_by_course(self, course_id: str) -> List: return self.quiz_repo.get_tests_by_course(course_id)
    def get_test_ids_by_course(self, course_id: str) -> List[str]: return self.quiz_repo.get_test_ids_by_course(course_id)
    def count_tests_by_creator(self, teacher_id: str) -> int: return self.quiz_repo.count_tests_by_creator(teacher_id)
    def add_question(self, record: Dict): return self.quiz_repo.add_question(record)
    def get_questions_by_test(self, test_id: str) -> List: return self.quiz_repo.get_questions_by_test(test_id)
    def add_test_result(self, record: Dict): return self.quiz_repo.add_test_result(record)
    def get_results_by_test(self, test_id: str) -> List: return self.quiz_repo.get_results_by_test(test_id)
    def get_results_for_student(self, student_id: str, test_ids: Optional[Iterable[str]] = None) -> List: return self.quiz_repo.get_results_for_student(student_id, test_ids=test_ids)

    # --- ASSIGNMENT METHODS (DELEGATED) ---
    def add_assignment(self, record: Dict): return self.assignment_repo.add_assignment(record)
    def get_assignment_by_id(self, assignment_id: str): return self.assignment_repo.get_assignment_by_id(assignment_id)
    def get_assignments_by_course(self, course_id: str) -> List: return self.assignment_repo.get_assignments_by_course(course_id)
    def get_assignment_ids_by_courses(self, course_ids: Iterable[str]) -> List[str]: return self.assignment_repo.get_assignment_ids_by_courses(course_ids)
    def get_assignment_ids_by_creator(self, teacher_id: str) -> List[str]: return self.assignment_repo.get_assignment_ids_by_creator(teacher_id)
    def add_submission(self, record: Dict): return self.assignment_repo.add_submission(record)
    def get_submission_by_id(self, submission_id: str): return self.assignment_repo.get_submission_by_id(submission_id)
    def get_submission(self, assignment_id: str, student_id: str): return self.assignment_repo.get_submission(assignment_id, student_id)
    def get_submissions_by_assignment(self, assignment_id: str) -> List: return self.assignment_repo.get_submissions_by_assignment(assignment_id)
    def get_submissions_for_student(self, student_id: str, assignment_ids: Iterable[str]) -> List: return self.assignment_repo.get_submissions_for_student(student_id, assignment_ids)
    def count_ungraded_submissions(self, assignment_ids: Iterable[str], student_id: Optional[str] = None) -> int: return self.assignment_repo.count_ungraded_submissions(assignment_ids, student_id=student_id)
    def update_submission_grade(self, submission_id: str, marks: float, feedback: Optional[str], status: str, graded_at):
        return self.assignment_repo.update_submission_grade(submission_id, marks, feedback, status, graded_at)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the
    request-scoped session.
    """
    yield DatabaseService(db_session=db)
