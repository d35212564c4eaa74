# /lms/routers/lecture_router.py

import logging

from fastapi import APIRouter, Depends, status

from ..core import errors
from ..core.deps import get_auth_context, require_teacher
from ..models import course_model
from ..models.user_model import AuthContext
from ..services import course_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

def _create(lecture_create: course_model.LectureCreate, db: DatabaseService):
    try:
        lecture = course_service.create_lecture(lecture_create, db=db)
        return {"message": "Lecture added successfully", "lecture": lecture}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Adding lecture failed")
        raise errors.internal_error("Server error while adding lecture", e)

@router.post("/create", response_model=course_model.LectureResponse, status_code=status.HTTP_201_CREATED, summary="Add a Lecture to a Course")
def create_lecture(lecture_create: course_model.LectureCreate, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    return _create(lecture_create, db)

# Older clients post to /add.
@router.post("/add", response_model=course_model.LectureResponse, status_code=status.HTTP_201_CREATED, summary="Add a Lecture to a Course (alias)")
def add_lecture(lecture_create: course_model.LectureCreate, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    return _create(lecture_create, db)

@router.get("/course/{course_id}", response_model=course_model.LectureListResponse, summary="List a Course's Lectures in Order")
def get_course_lectures(course_id: str, ctx: AuthContext = Depends(get_auth_context), db: DatabaseService = Depends(get_db_service)):
    try:
        lectures = course_service.list_course_lectures(course_id, db=db)
        return {
            "message": "Lectures retrieved successfully",
            "courseId": course_id,
            "lectureCount": len(lectures),
            "lectures": lectures,
        }
    except Exception as e:
        logger.exception("Fetching lectures for course %s failed", course_id)
        raise errors.internal_error("Server error while fetching lectures", e)
