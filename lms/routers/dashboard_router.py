# /lms/routers/dashboard_router.py

# --- Core FastAPI Imports ---
import logging

from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core import errors
from ..core.deps import require_student, require_teacher
from ..models.dashboard_model import StudentDashboard, TeacherDashboard
from ..models.user_model import AuthContext
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

# --- Endpoint Definitions ---
@router.get(
    "/student",
    response_model=StudentDashboard,
    summary="Get the Student Dashboard",
    description="Enrolled course count, overall quiz average and pending assignments for the caller.",
)
def get_student_dashboard(ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        return dashboard_service.get_student_dashboard(ctx.user_id, db=db)
    except Exception as e:
        logger.exception("Student dashboard failed")
        raise errors.internal_error("Error fetching student dashboard", e)


@router.get(
    "/teacher",
    response_model=TeacherDashboard,
    summary="Get the Teacher Dashboard",
)
def get_teacher_dashboard(ctx: AuthContext = Depends(require_teacher), db: DatabaseService = Depends(get_db_service)):
    try:
        return dashboard_service.get_teacher_dashboard(ctx.user_id, db=db)
    except Exception as e:
        logger.exception("Teacher dashboard failed")
        raise errors.internal_error("Error fetching teacher dashboard", e)
