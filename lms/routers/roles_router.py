# /lms/routers/roles_router.py

from fastapi import APIRouter, Depends

from ..core.deps import require_admin, require_student, require_teacher
from ..models.user_model import AuthContext, RoleWelcomeResponse

router = APIRouter()

# Smoke-test endpoints for each role gate; they echo the resolved identity.

@router.get("/student", response_model=RoleWelcomeResponse, summary="Student Gate Check")
def student_welcome(ctx: AuthContext = Depends(require_student)):
    return {"message": "Welcome Student Dashboard", "user": ctx}

@router.get("/teacher", response_model=RoleWelcomeResponse, summary="Teacher Gate Check")
def teacher_welcome(ctx: AuthContext = Depends(require_teacher)):
    return {"message": "Welcome Teacher Dashboard", "user": ctx}

@router.get("/admin", response_model=RoleWelcomeResponse, summary="Admin Gate Check")
def admin_welcome(ctx: AuthContext = Depends(require_admin)):
    return {"message": "Welcome Admin Dashboard", "user": ctx}
