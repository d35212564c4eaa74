# /lms/services/quiz_service.py

"""
The quiz engine: teachers author tests and multiple-choice questions,
students take them, and every attempt is graded and stored.

Scores are whole percentages of the test's full question count. Answers
for questions the student skipped, or for question ids that do not belong
to the test, simply do not count as correct.
"""

import logging
import uuid
from typing import Dict, List, Tuple

from ..core import errors
from ..models import quiz_model
from .database_service import DatabaseService
from .progress_helpers import calculations

logger = logging.getLogger(__name__)

UNKNOWN_STUDENT = "Unknown Student"
MISSING_EMAIL = "N/A"


# --- Authoring ---

def create_test(test_data: quiz_model.TestCreate, db: DatabaseService, teacher_id: str) -> str:
    if not test_data.title:
        raise errors.ValidationError("Title is required")
    if not test_data.courseId:
        raise errors.ValidationError("Course ID is required")

    test = db.add_test({
        "id": f"tst_{uuid.uuid4().hex[:12]}",
        "title": test_data.title,
        "course_id": test_data.courseId,
        "created_by": teacher_id,
    })
    logger.info("Test %s created in course %s", test.id, test.course_id)
    return test.id


def add_question(question_data: quiz_model.QuestionCreate, db: DatabaseService) -> str:
    """
    Adds a question to an existing test. The correct answer must match one of
    the options exactly (case and whitespace included); nothing is stored
    when any check fails.
    """
    if not question_data.testId:
        raise errors.ValidationError("Test ID is required")
    if not question_data.questionText:
        raise errors.ValidationError("Question text is required")
    if not question_data.options:
        raise errors.ValidationError("Options are required")
    if not question_data.correctAnswer:
        raise errors.ValidationError("Correct answer is required")
    if question_data.correctAnswer not in question_data.options:
        raise errors.ValidationError("Correct answer must be one of the options")

    if db.get_test_by_id(question_data.testId) is None:
        raise errors.NotFoundError("Test not found")

    question = db.add_question({
        "id": f"qst_{uuid.uuid4().hex[:12]}",
        "test_id": question_data.testId,
        "question_text": question_data.questionText,
        "options": list(question_data.options),
        "correct_answer": question_data.correctAnswer,
    })
    return question.id


# --- Delivery ---

def list_course_tests(course_id: str, db: DatabaseService) -> List[Dict]:
    return [{"id": t.id, "title": t.title} for t in db.get_tests_by_course(course_id)]


def get_test_for_student(test_id: str, db: DatabaseService) -> Dict:
    """The test and its questions with every correct answer removed."""
    test = db.get_test_by_id(test_id)
    if test is None:
        raise errors.NotFoundError("Test not found")

    questions = [
        {"id": q.id, "testId": q.test_id, "questionText": q.question_text, "options": q.options}
        for q in db.get_questions_by_test(test_id)
    ]
    return {
        "test": {"id": test.id, "title": test.title, "courseId": test.course_id},
        "questions": questions,
        "totalQuestions": len(questions),
    }


# --- Submission & Grading ---

def grade_answers(answers: List[quiz_model.AnswerIn], answer_key: Dict[str, str]) -> Tuple[int, List[Dict]]:
    """
    Marks each submitted answer against `answer_key` (question id -> correct
    option). Returns the number correct and the processed answers in the
    order they were submitted.

    Only the first answer to a question is marked; repeats of the same
    question id are kept in the list but never count as correct.
    """
    correct = 0
    processed = []
    seen = set()
    for answer in answers:
        expected = answer_key.get(answer.questionId)
        is_correct = (
            answer.questionId not in seen
            and expected is not None
            and answer.selectedAnswer == expected
        )
        seen.add(answer.questionId)
        if is_correct:
            correct += 1
        processed.append({
            "questionId": answer.questionId,
            "selectedAnswer": answer.selectedAnswer,
            "isCorrect": is_correct,
        })
    return correct, processed


def submit_test(submission: quiz_model.TestSubmission, db: DatabaseService, student_id: str) -> Dict:
    if not submission.testId:
        raise errors.ValidationError("Test ID is required")
    if not submission.answers:
        raise errors.ValidationError("Answers are required")

    test = db.get_test_by_id(submission.testId)
    if test is None:
        raise errors.NotFoundError("Test not found")

    questions = db.get_questions_by_test(test.id)
    if not questions:
        raise errors.ValidationError("This test has no questions yet")

    answer_key = {q.id: q.correct_answer for q in questions}
    correct, processed = grade_answers(submission.answers, answer_key)
    total = len(questions)
    score = calculations.percentage_score(correct, total)

    result = db.add_test_result({
        "id": f"res_{uuid.uuid4().hex[:12]}",
        "test_id": test.id,
        "student_id": student_id,
        "score": score,
        "answers": processed,
    })
    logger.info("Student %s scored %d%% on test %s (%d/%d)", student_id, score, test.id, correct, total)

    return {
        "testResult": {"id": result.id, "score": score, "correctAnswers": correct, "totalQuestions": total},
        "score": score,
        "correctAnswers": correct,
        "totalQuestions": total,
        "answers": processed,
    }


def get_results_for_test(test_id: str, db: DatabaseService) -> Dict:
    """
    Every attempt at a test, newest first, with the student's identity.

    `correctAnswers` and `totalQuestions` are read back from the answers
    stored with each attempt, so `totalQuestions` is the number of answers
    the student sent, which can differ from the test's current size.
    """
    test = db.get_test_by_id(test_id)
    if test is None:
        raise errors.NotFoundError("Test not found")

    results = db.get_results_by_test(test_id)
    students = db.get_users_by_ids(r.student_id for r in results)

    rows = []
    for r in results:
        student = students.get(r.student_id)
        stored = r.answers or []
        rows.append({
            "id": r.id,
            "studentId": r.student_id,
            "studentName": student.name if student else UNKNOWN_STUDENT,
            "studentEmail": student.email if student else MISSING_EMAIL,
            "score": r.score,
            "correctAnswers": sum(1 for a in stored if a.get("isCorrect")),
            "totalQuestions": len(stored),
            "submittedAt": r.submitted_at,
        })

    return {
        "testId": test.id,
        "testTitle": test.title,
        "results": rows,
        "totalResults": len(rows),
        "averageScore": calculations.average_score(r["score"] for r in rows),
    }
