# /lms/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core import config
from .core.errors import LMSError
from .core.logging_config import configure_logging

# --- Application-specific Router Imports ---
from .routers import (
    admin_router,
    assignment_router,
    certificate_router,
    course_router,
    dashboard_router,
    enrollment_router,
    lecture_router,
    progress_router,
    quiz_router,
    roles_router,
    watch_time_router,
)

# --- Database Imports for Startup Logic ---
from .db.base import Base
from .db.database import engine

logger = logging.getLogger(__name__)

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    configure_logging(config.LOG_LEVEL)
    Base.metadata.create_all(bind=engine)
    logger.info("LMS backend started")
    yield
    # This code runs ONCE when the application shuts down.
    logger.info("LMS backend stopped")

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="LMS Backend API",
    description="Courses, lectures, quizzes, assignments, progress tracking and certificates.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error Rendering ---
# Every error body carries a top-level "message" that clients show as-is.

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    first = exc.errors()[0] if exc.errors() else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"Invalid value for {field}: {first.get('msg')}" if field else "Invalid request body"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})

@app.exception_handler(LMSError)
async def lms_error_handler(request: Request, exc: LMSError):
    return JSONResponse(status_code=exc.status_code, content=exc.payload())

# --- API Router Inclusion ---
app.include_router(roles_router.router, prefix="/api/role", tags=["Roles"])
app.include_router(course_router.router, prefix="/api/course", tags=["Courses"])
app.include_router(enrollment_router.router, prefix="/api/enrollment", tags=["Enrollments"])
app.include_router(lecture_router.router, prefix="/api/lecture", tags=["Lectures"])
app.include_router(watch_time_router.router, prefix="/api/watch-time", tags=["Watch Time"])
app.include_router(progress_router.router, prefix="/api/progress", tags=["Progress"])
app.include_router(quiz_router.router, prefix="/api/test", tags=["Quizzes"])
app.include_router(assignment_router.router, prefix="/api/assignment", tags=["Assignments"])
app.include_router(certificate_router.router, prefix="/api/certificate", tags=["Certificates"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(admin_router.router, prefix="/api/admin", tags=["Admin"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"message": "LMS API Server", "status": "LMS Backend is running!", "version": app.version}
