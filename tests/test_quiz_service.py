# /tests/test_quiz_service.py

import pytest

from lms.core import errors
from lms.db.models.quiz_models import Question
from lms.models.quiz_model import AnswerIn, QuestionCreate, TestCreate, TestSubmission
from lms.services import quiz_service

OPTIONS = ["A", "B", "C", "D"]


@pytest.fixture
def teacher(make_user):
    return make_user("teacher")


@pytest.fixture
def student(make_user):
    return make_user("student", name="Quinn Student", email="quinn@example.com")


@pytest.fixture
def course(teacher, make_course):
    return make_course(teacher.id)


@pytest.fixture
def four_question_test(teacher, course, db_service):
    """A test with four questions whose correct answers are A, B, C, D in turn."""
    test_id = quiz_service.create_test(TestCreate(title="Unit 1", courseId=course.id), db=db_service, teacher_id=teacher.id)
    question_ids = [
        quiz_service.add_question(
            QuestionCreate(testId=test_id, questionText=f"Q{i}", options=OPTIONS, correctAnswer=OPTIONS[i]),
            db=db_service,
        )
        for i in range(4)
    ]
    return test_id, question_ids


def _submit(test_id, answers, student_id, db):
    submission = TestSubmission(
        testId=test_id,
        answers=[AnswerIn(questionId=qid, selectedAnswer=sel) for qid, sel in answers],
    )
    return quiz_service.submit_test(submission, db=db, student_id=student_id)


# --- Authoring ---

def test_create_test_requires_title_and_course(teacher, db_service):
    with pytest.raises(errors.ValidationError, match="Title is required"):
        quiz_service.create_test(TestCreate(courseId="crs_1"), db=db_service, teacher_id=teacher.id)
    with pytest.raises(errors.ValidationError, match="Course ID is required"):
        quiz_service.create_test(TestCreate(title="T"), db=db_service, teacher_id=teacher.id)


def test_correct_answer_must_be_an_option(four_question_test, db_service, session):
    """
    GIVEN an existing test
    WHEN a question is added whose correct answer is not among its options
    THEN it is rejected and nothing is stored.
    """
    test_id, _ = four_question_test
    before = session.query(Question).count()

    with pytest.raises(errors.ValidationError, match="Correct answer must be one of the options"):
        quiz_service.add_question(
            QuestionCreate(testId=test_id, questionText="Q?", options=OPTIONS, correctAnswer="E"),
            db=db_service,
        )

    assert session.query(Question).count() == before
    print("\n✅ SUCCESS: test_correct_answer_must_be_an_option passed.")


def test_correct_answer_match_is_exact(four_question_test, db_service):
    test_id, _ = four_question_test
    with pytest.raises(errors.ValidationError):
        quiz_service.add_question(
            QuestionCreate(testId=test_id, questionText="Q?", options=OPTIONS, correctAnswer="a"),
            db=db_service,
        )


def test_question_for_unknown_test_is_not_found(db_service):
    with pytest.raises(errors.NotFoundError, match="Test not found"):
        quiz_service.add_question(
            QuestionCreate(testId="tst_missing", questionText="Q?", options=OPTIONS, correctAnswer="A"),
            db=db_service,
        )


def test_student_view_hides_correct_answers(four_question_test, db_service):
    test_id, _ = four_question_test
    view = quiz_service.get_test_for_student(test_id, db=db_service)

    assert view["totalQuestions"] == 4
    for question in view["questions"]:
        assert "correctAnswer" not in question
        assert question["options"] == OPTIONS


# --- Scoring ---

def test_all_correct_scores_100(four_question_test, student, db_service):
    test_id, qids = four_question_test
    result = _submit(test_id, zip(qids, OPTIONS), student.id, db_service)
    assert result["score"] == 100
    assert result["correctAnswers"] == 4
    assert result["totalQuestions"] == 4


def test_none_correct_scores_0(four_question_test, student, db_service):
    test_id, qids = four_question_test
    result = _submit(test_id, [(qid, "D" if i != 3 else "A") for i, qid in enumerate(qids)], student.id, db_service)
    assert result["score"] == 0


def test_partial_submission_divides_by_all_questions(four_question_test, student, db_service):
    """
    GIVEN a test with 4 questions
    WHEN the student answers 2 correctly and omits the other 2
    THEN the score is 2/4 = 50, not 2/2 = 100.
    """
    test_id, qids = four_question_test
    result = _submit(test_id, [(qids[0], "A"), (qids[1], "B")], student.id, db_service)

    assert result["score"] == 50
    assert result["correctAnswers"] == 2
    assert result["totalQuestions"] == 4
    assert result["testResult"]["score"] == 50
    print("\n✅ SUCCESS: test_partial_submission_divides_by_all_questions passed.")


def test_unknown_question_ids_count_as_incorrect(four_question_test, student, db_service):
    test_id, qids = four_question_test
    result = _submit(test_id, [(qids[0], "A"), ("qst_foreign", "A")], student.id, db_service)

    assert result["correctAnswers"] == 1
    assert [a["isCorrect"] for a in result["answers"]] == [True, False]


def test_every_attempt_is_recorded(four_question_test, student, db_service):
    test_id, qids = four_question_test
    _submit(test_id, [(qids[0], "A")], student.id, db_service)
    _submit(test_id, zip(qids, OPTIONS), student.id, db_service)

    assert len(db_service.get_results_by_test(test_id)) == 2


def test_submission_validation(four_question_test, student, db_service):
    test_id, _ = four_question_test
    with pytest.raises(errors.ValidationError, match="Test ID is required"):
        quiz_service.submit_test(TestSubmission(answers=[AnswerIn(questionId="q", selectedAnswer="A")]), db=db_service, student_id=student.id)
    with pytest.raises(errors.ValidationError, match="Answers are required"):
        quiz_service.submit_test(TestSubmission(testId=test_id, answers=[]), db=db_service, student_id=student.id)
    with pytest.raises(errors.NotFoundError, match="Test not found"):
        quiz_service.submit_test(
            TestSubmission(testId="tst_missing", answers=[AnswerIn(questionId="q", selectedAnswer="A")]),
            db=db_service, student_id=student.id,
        )


def test_test_without_questions_is_not_open(teacher, course, student, db_service):
    test_id = quiz_service.create_test(TestCreate(title="Empty", courseId=course.id), db=db_service, teacher_id=teacher.id)
    with pytest.raises(errors.ValidationError, match="This test has no questions yet"):
        _submit(test_id, [("qst_x", "A")], student.id, db_service)


# --- Results ---

def test_results_read_back_stored_answers(four_question_test, student, db_service):
    """totalQuestions in the results view is the number of answers the student sent."""
    test_id, qids = four_question_test
    _submit(test_id, [(qids[0], "A"), (qids[1], "C")], student.id, db_service)

    report = quiz_service.get_results_for_test(test_id, db=db_service)

    assert report["totalResults"] == 1
    row = report["results"][0]
    assert row["studentName"] == "Quinn Student"
    assert row["studentEmail"] == "quinn@example.com"
    assert row["score"] == 25
    assert row["correctAnswers"] == 1
    assert row["totalQuestions"] == 2
    assert report["averageScore"] == 25


def test_results_for_deleted_student_use_placeholders(four_question_test, student, db_service):
    test_id, qids = four_question_test
    _submit(test_id, [(qids[0], "A")], student.id, db_service)
    db_service.delete_user(student.id)

    row = quiz_service.get_results_for_test(test_id, db=db_service)["results"][0]

    assert row["studentName"] == "Unknown Student"
    assert row["studentEmail"] == "N/A"


def test_results_empty_has_null_average(four_question_test, db_service):
    test_id, _ = four_question_test
    report = quiz_service.get_results_for_test(test_id, db=db_service)
    assert report["results"] == []
    assert report["averageScore"] is None


def test_list_course_tests(four_question_test, course, db_service):
    test_id, _ = four_question_test
    assert quiz_service.list_course_tests(course.id, db=db_service) == [{"id": test_id, "title": "Unit 1"}]


def test_repeated_question_ids_are_marked_once(four_question_test, student, db_service):
    """
    GIVEN a test with 4 questions
    WHEN the student sends the same correct answer to the first question 8 times
    THEN only the first copy counts and the score stays within 0-100.
    """
    test_id, qids = four_question_test
    result = _submit(test_id, [(qids[0], "A")] * 8, student.id, db_service)

    assert result["correctAnswers"] == 1
    assert result["score"] == 25
    assert [a["isCorrect"] for a in result["answers"]] == [True] + [False] * 7
    assert 0 <= db_service.get_results_by_test(test_id)[0].score <= 100
    print("\n✅ SUCCESS: test_repeated_question_ids_are_marked_once passed.")


def test_wrong_first_answer_is_not_rescued_by_a_repeat(four_question_test, student, db_service):
    test_id, qids = four_question_test
    result = _submit(test_id, [(qids[0], "B"), (qids[0], "A")], student.id, db_service)
    assert result["correctAnswers"] == 0
