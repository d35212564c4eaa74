# /lms/routers/assignment_router.py

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..core import errors
from ..core.deps import get_auth_context, require_student, require_teacher
from ..models import assignment_model
from ..models.user_model import AuthContext
from ..services import assignment_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

# --- ASSIGNMENT COLLECTION ENDPOINTS ---

@router.post("/create", response_model=assignment_model.AssignmentCreateResponse, status_code=status.HTTP_201_CREATED, summary="Create an Assignment")
def create_assignment(assignment_create: assignment_model.AssignmentCreate, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        assignment_id = assignment_service.create_assignment(assignment_create, db=db, teacher_id=ctx.user_id)
        return {"message": "Assignment created successfully", "assignmentId": assignment_id}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Assignment creation failed")
        raise errors.internal_error("Error creating assignment", e)

@router.get("/course/{course_id}", response_model=assignment_model.CourseAssignmentsResponse, summary="List a Course's Assignments by Due Date")
def get_course_assignments(course_id: str, ctx: AuthContext = Depends(get_auth_context), db: DatabaseService = Depends(get_db_service)):
    try:
        assignments = assignment_service.list_course_assignments(course_id, db=db)
        return {
            "message": "Assignments retrieved successfully",
            "assignments": assignments,
            "totalAssignments": len(assignments),
        }
    except Exception as e:
        logger.exception("Fetching assignments for course %s failed", course_id)
        raise errors.internal_error("Error fetching assignments", e)

# --- SUBMISSION & GRADING ---

@router.post("/submit", response_model=assignment_model.AssignmentSubmitResponse, status_code=status.HTTP_201_CREATED, summary="Submit an Answer")
def submit_assignment(submit_request: assignment_model.AssignmentSubmit, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        submission_id = assignment_service.submit_assignment(submit_request, db=db, student_id=ctx.user_id)
        return {"message": "Assignment submitted successfully", "submissionId": submission_id}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Assignment submission failed")
        raise errors.internal_error("Error submitting assignment", e)

@router.post("/evaluate", response_model=assignment_model.SubmissionResponse, summary="Grade a Submission (legacy body form)")
def evaluate_submission(evaluate_request: assignment_model.EvaluateRequest, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        submission = assignment_service.evaluate_submission(evaluate_request, db=db)
        return {"message": "Assignment evaluated successfully", "submission": submission}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Evaluating submission failed")
        raise errors.internal_error("Error evaluating assignment", e)

@router.get("/submission/{submission_id}", response_model=assignment_model.SubmissionResponse, summary="Get One Submission")
def get_submission(submission_id: str, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        submission = assignment_service.get_submission(submission_id, db=db)
        return {"message": "Submission retrieved successfully", "submission": submission}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Fetching submission %s failed", submission_id)
        raise errors.internal_error("Error fetching submission", e)

@router.put("/submission/{submission_id}/grade", response_model=assignment_model.SubmissionResponse, summary="Grade a Submission")
def grade_submission(submission_id: str, grade_request: assignment_model.GradeRequest, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        submission = assignment_service.grade_submission(submission_id, grade_request.marks, db=db, feedback=grade_request.feedback)
        return {"message": "Assignment graded successfully", "submission": submission}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Grading submission %s failed", submission_id)
        raise errors.internal_error("Error grading submission", e)

# --- PER-ASSIGNMENT SUB-RESOURCES ---

@router.get(
    "/{assignment_id}/my-submission",
    response_model=assignment_model.SubmissionResponse,
    responses={404: {"model": assignment_model.SubmissionResponse}},
    summary="Get the Caller's Own Submission",
)
def get_my_submission(assignment_id: str, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        submission = assignment_service.get_my_submission(assignment_id, ctx.user_id, db=db)
    except Exception as e:
        logger.exception("Fetching own submission failed")
        raise errors.internal_error("Error fetching submission result", e)

    if submission is None:
        # Not having submitted yet is an ordinary state; the body says so explicitly.
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Submission not found", "submission": None})
    return {"message": "Submission retrieved successfully", "submission": submission}

@router.get("/{assignment_id}/submissions", response_model=assignment_model.SubmissionListResponse, summary="List an Assignment's Submissions")
def get_assignment_submissions(assignment_id: str, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        submissions = assignment_service.list_submissions_for_assignment(assignment_id, db=db)
        return {
            "message": "Submissions retrieved successfully",
            "submissions": submissions,
            "totalSubmissions": len(submissions),
        }
    except Exception as e:
        logger.exception("Fetching submissions for assignment %s failed", assignment_id)
        raise errors.internal_error("Error fetching submissions", e)
