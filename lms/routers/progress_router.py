# /lms/routers/progress_router.py

import logging

from fastapi import APIRouter, Depends, status

from ..core import errors
from ..core.deps import require_student
from ..models import progress_model
from ..models.user_model import AuthContext
from ..services import progress_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/complete", response_model=progress_model.MarkCompleteResponse, status_code=status.HTTP_201_CREATED, summary="Mark a Lecture as Completed")
def mark_complete(payload: progress_model.MarkCompleteRequest, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        progress = progress_service.mark_lecture_complete(ctx.user_id, payload.courseId, payload.lectureId, db=db)
        return {"message": "Lecture marked as completed", "progress": progress}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Marking lecture complete failed")
        raise errors.internal_error("Server error while marking lecture as completed", e)

@router.get("/course/{course_id}", response_model=progress_model.CourseProgressResponse, summary="Get Completed-Lecture Progress for a Course")
def get_course_progress(course_id: str, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        progress = progress_service.get_course_progress(ctx.user_id, course_id, db=db)
        return {"message": "Course progress retrieved successfully", **progress}
    except Exception as e:
        logger.exception("Fetching course progress failed")
        raise errors.internal_error("Server error while fetching progress", e)

@router.get(
    "/summary/{course_id}",
    response_model=progress_model.ProgressSummary,
    summary="Get the Progress Summary for a Course",
    description="Lectures watched, quiz average and assignment status for the caller in one course.",
)
def get_progress_summary(course_id: str, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        return progress_service.get_progress_summary(ctx.user_id, course_id, db=db)
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Progress summary failed for course %s", course_id)
        raise errors.internal_error("Error fetching progress summary", e)
