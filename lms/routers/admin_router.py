# /lms/routers/admin_router.py

import logging

from fastapi import APIRouter, Depends, status

from ..core import errors
from ..core.deps import require_admin
from ..models import dashboard_model, user_model
from ..models.user_model import AuthContext
from ..services import admin_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

# --- READ-ONLY CONSOLE VIEWS ---

@router.get("/stats", response_model=dashboard_model.AdminStats, summary="Get Platform Totals")
def get_stats(ctx: AuthContext = Depends(require_admin), db: DatabaseService = Depends(get_db_service)):
    try:
        return {"message": "Admin stats retrieved successfully", **admin_service.get_stats(ctx.user_id, db=db)}
    except Exception as e:
        logger.exception("Admin stats failed")
        raise errors.internal_error("Error fetching admin stats", e)

@router.get("/users", response_model=user_model.UserListResponse, summary="List All Users")
def get_users(ctx: AuthContext = Depends(require_admin), db: DatabaseService = Depends(get_db_service)):
    try:
        users = admin_service.list_users(db=db)
        return {"message": "Users retrieved successfully", "count": len(users), "users": users}
    except Exception as e:
        logger.exception("Listing users failed")
        raise errors.internal_error("Error fetching users", e)

@router.get("/teachers", response_model=dashboard_model.TeacherListResponse, summary="List Teachers with Course Counts")
def get_teachers(ctx: AuthContext = Depends(require_admin), db: DatabaseService = Depends(get_db_service)):
    try:
        teachers = admin_service.list_teachers(db=db)
        return {"message": "Teachers retrieved successfully", "count": len(teachers), "teachers": teachers}
    except Exception as e:
        logger.exception("Listing teachers failed")
        raise errors.internal_error("Error fetching teachers", e)

@router.get("/courses", response_model=dashboard_model.AdminCourseListResponse, summary="List All Courses with Their Teacher")
def get_courses(ctx: AuthContext = Depends(require_admin), db: DatabaseService = Depends(get_db_service)):
    try:
        courses = admin_service.list_courses(db=db)
        return {"message": "Courses retrieved successfully", "count": len(courses), "courses": courses}
    except Exception as e:
        logger.exception("Listing courses failed")
        raise errors.internal_error("Error fetching courses", e)

@router.get("/enrollments", response_model=dashboard_model.AdminEnrollmentsResponse, summary="Get Enrollment Details and Per-Course Counts")
def get_enrollments(ctx: AuthContext = Depends(require_admin), db: DatabaseService = Depends(get_db_service)):
    try:
        return {"message": "Enrollments retrieved successfully", **admin_service.get_enrollment_overview(db=db)}
    except Exception as e:
        logger.exception("Enrollment overview failed")
        raise errors.internal_error("Error fetching enrollments", e)

# --- USER MANAGEMENT ---

@router.post("/create", response_model=dashboard_model.AdminCreateResponse, status_code=status.HTTP_201_CREATED, summary="Create an Admin User")
def create_admin(admin_create: user_model.AdminCreate, ctx: AuthContext = Depends(require_admin), db: DatabaseService = Depends(get_db_service)):
    try:
        admin = admin_service.create_admin(admin_create, db=db)
        return {"message": "Admin user created successfully", "admin": admin}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Admin creation failed")
        raise errors.internal_error("Error creating admin user", e)

@router.patch("/user/{user_id}/role", response_model=user_model.UserMutationResponse, summary="Change a User's Role")
def change_role(user_id: str, role_update: user_model.RoleUpdate, ctx: AuthContext = Depends(require_admin), db: DatabaseService = Depends(get_db_service)):
    try:
        user = admin_service.change_role(user_id, role_update.role, db=db)
        return {"message": "User role updated successfully", "user": user}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Changing role for user %s failed", user_id)
        raise errors.internal_error("Error changing user role", e)

@router.delete("/user/{user_id}", response_model=dashboard_model.DeleteUserResponse, summary="Delete a User")
def delete_user(user_id: str, ctx: AuthContext = Depends(require_admin), db: DatabaseService = Depends(get_db_service)):
    try:
        deleted = admin_service.delete_user(user_id, admin_id=ctx.user_id, db=db)
        return {"message": "User deleted successfully", "deletedUser": deleted}
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Deleting user %s failed", user_id)
        raise errors.internal_error("Error deleting user", e)
