# /lms/routers/enrollment_router.py

import logging

from fastapi import APIRouter, Depends

from ..core import errors
from ..core.deps import require_teacher
from ..models import course_model
from ..models.user_model import AuthContext
from ..services import course_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/course/{course_id}", response_model=course_model.CourseEnrollmentsResponse, summary="List a Course's Enrollments")
def get_course_enrollments(course_id: str, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        enrollments = course_service.list_course_enrollments(course_id, db=db)
        return {
            "message": "Enrollments retrieved successfully",
            "courseId": course_id,
            "enrollments": enrollments,
            "count": len(enrollments),
        }
    except Exception as e:
        logger.exception("Fetching enrollments for course %s failed", course_id)
        raise errors.internal_error("Error fetching enrollments", e)
