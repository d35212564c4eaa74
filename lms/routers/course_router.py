# /lms/routers/course_router.py

import logging

from fastapi import APIRouter, Depends, status

from ..core import errors
from ..core.deps import require_student, require_teacher
from ..models import course_model
from ..models.user_model import AuthContext
from ..services import course_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

# --- TEACHER ENDPOINTS ---

@router.post("/create", response_model=course_model.CourseResponse, status_code=status.HTTP_201_CREATED, summary="Create a Course")
def create_course(course_create: course_model.CourseCreate, ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        course = course_service.create_course(course_create, db=db, teacher_id=ctx.user_id)
        return {"message": "Course created successfully", "course": course}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Course creation failed")
        raise errors.internal_error("Server error while creating course", e)

@router.get("/teacher", response_model=course_model.CourseListResponse, summary="Get the Caller's Own Courses")
def get_teacher_courses(ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        courses = course_service.list_teacher_courses(db=db, teacher_id=ctx.user_id)
        return {"message": "Teacher courses retrieved successfully", "courses": courses}
    except Exception as e:
        logger.exception("Fetching teacher courses failed")
        raise errors.internal_error("Server error while fetching teacher courses", e)

# --- STUDENT ENDPOINTS ---

@router.get("/all", response_model=course_model.CourseListResponse, summary="Browse All Courses")
def get_all_courses(ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        return {"message": "Courses retrieved successfully", "courses": course_service.list_all_courses(db=db)}
    except Exception as e:
        logger.exception("Fetching courses failed")
        raise errors.internal_error("Server error while fetching courses", e)

@router.post("/enroll", response_model=course_model.EnrollmentResponse, status_code=status.HTTP_201_CREATED, summary="Enroll in a Course")
def enroll_in_course(enroll_request: course_model.EnrollRequest, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        enrollment = course_service.enroll(enroll_request, db=db, student_id=ctx.user_id)
        return {"message": "Enrolled in course successfully", "enrollment": enrollment}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Enrollment failed")
        raise errors.internal_error("Server error while enrolling in course", e)

@router.get("/enrolled", response_model=course_model.CourseListResponse, summary="Get the Caller's Enrolled Courses")
def get_enrolled_courses(ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        courses = course_service.list_enrolled_courses(db=db, student_id=ctx.user_id)
        return {"message": "Enrolled courses retrieved successfully", "courses": courses}
    except Exception as e:
        logger.exception("Fetching enrolled courses failed")
        raise errors.internal_error("Server error while fetching enrolled courses", e)
