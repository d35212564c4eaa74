# /lms/routers/watch_time_router.py

import logging

from fastapi import APIRouter, Depends, Response, status

from ..core import errors
from ..core.deps import require_student
from ..models import progress_model
from ..models.user_model import AuthContext
from ..services import watch_time_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post(
    "/save",
    response_model=progress_model.WatchTimeSaveResponse,
    summary="Save the Playback Position in a Lecture",
    description="Creates the watch-time record (201) or updates the existing one (200).",
)
def save_watch_time(payload: progress_model.WatchTimeSave, response: Response, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        record, created = watch_time_service.save_watch_time(ctx.user_id, payload.lectureId, payload.currentTime, db=db)
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Saving watch time failed")
        raise errors.internal_error("Server error while saving watch time", e)

    if created:
        response.status_code = status.HTTP_201_CREATED
        return {"message": "Watch time saved successfully", "watchTime": record}
    return {"message": "Watch time updated successfully", "watchTime": record}

@router.get("/lecture/{lecture_id}", response_model=progress_model.WatchTimeResponse, summary="Get the Saved Position in a Lecture")
def get_watch_time(lecture_id: str, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        current_time, found = watch_time_service.get_watch_time(ctx.user_id, lecture_id, db=db)
    except Exception as e:
        logger.exception("Fetching watch time failed")
        raise errors.internal_error("Server error while fetching watch time", e)

    message = "Watch time retrieved successfully" if found else "No watch time found. Starting from beginning"
    return {"message": message, "lectureId": lecture_id, "currentTime": current_time}

@router.get("/course/{course_id}", response_model=progress_model.CourseWatchStatsResponse, summary="Count Watched Lectures in a Course")
def get_course_watch_stats(course_id: str, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        stats = watch_time_service.count_watched_lectures(ctx.user_id, course_id, db=db)
        return {"message": "Watch statistics retrieved successfully", **stats}
    except Exception as e:
        logger.exception("Counting watched lectures failed")
        raise errors.internal_error("Server error while fetching watch time", e)
