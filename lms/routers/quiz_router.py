# /lms/routers/quiz_router.py

import logging

from fastapi import APIRouter, Depends, status

from ..core import errors
from ..core.deps import get_auth_context, require_teacher
from ..models import quiz_model
from ..models.user_model import AuthContext
from ..services import quiz_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

# --- AUTHORING (teacher) ---

@router.post("/create", response_model=quiz_model.TestCreateResponse, status_code=status.HTTP_201_CREATED, summary="Create a Test")
def create_test(test_create: quiz_model.TestCreate, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        test_id = quiz_service.create_test(test_create, db=db, teacher_id=ctx.user_id)
        return {"message": "Test created successfully", "testId": test_id}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Test creation failed")
        raise errors.internal_error("Error creating test", e)

@router.post("/question", response_model=quiz_model.QuestionCreateResponse, status_code=status.HTTP_201_CREATED, summary="Add a Question to a Test")
def add_question(question_create: quiz_model.QuestionCreate, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        question_id = quiz_service.add_question(question_create, db=db)
        return {"message": "Question added successfully", "questionId": question_id}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Adding question failed")
        raise errors.internal_error("Error adding question", e)

# --- TAKING A TEST ---
# The fixed paths are declared before "/{test_id}" so they are not captured by it.

@router.get("/course/{course_id}", response_model=quiz_model.CourseTestsResponse, summary="List a Course's Tests")
def get_course_tests(course_id: str, ctx: AuthContext = Depends(get_auth_context), db: DatabaseService = Depends(get_db_service)):
    try:
        tests = quiz_service.list_course_tests(course_id, db=db)
        return {"message": "Quizzes fetched successfully", "courseId": course_id, "tests": tests}
    except Exception as e:
        logger.exception("Fetching tests for course %s failed", course_id)
        raise errors.internal_error("Error fetching quizzes", e)

@router.post("/submit", response_model=quiz_model.TestSubmitResponse, summary="Submit Answers and Get the Score")
def submit_test(submission: quiz_model.TestSubmission, ctx: AuthContext = Depends(get_auth_context), db: DatabaseService = Depends(get_db_service)):
    try:
        result = quiz_service.submit_test(submission, db=db, student_id=ctx.user_id)
        return {"message": "Test submitted successfully", **result}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Test submission failed")
        raise errors.internal_error("Error submitting test", e)

@router.get("/{test_id}/results", response_model=quiz_model.TestResultsResponse, summary="Get Every Attempt at a Test")
def get_test_results(test_id: str, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        results = quiz_service.get_results_for_test(test_id, db=db)
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Fetching results for test %s failed", test_id)
        raise errors.internal_error("Error fetching quiz results", e)

    message = "Quiz results fetched successfully" if results["results"] else "No submissions yet"
    return {"message": message, **results}

@router.get("/{test_id}", response_model=quiz_model.TestForStudentResponse, summary="Get a Test Without Its Answers")
def get_test(test_id: str, ctx: AuthContext = Depends(get_auth_context), db: DatabaseService = Depends(get_db_service)):
    try:
        test = quiz_service.get_test_for_student(test_id, db=db)
        return {"message": "Test fetched successfully", **test}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Fetching test %s failed", test_id)
        raise errors.internal_error("Error fetching test", e)
