# /lms/models/assignment_model.py

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Any

# --- Core Enumerations ---
class SubmissionStatus(str, Enum):
    SUBMITTED = "submitted"
    CHECKED = "checked"

# --- Request Models ---

class AssignmentCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    courseId: Optional[str] = None
    dueDate: Optional[str] = Field(default=None, description="ISO-8601 date or date-time.")

class AssignmentSubmit(BaseModel):
    assignmentId: Optional[str] = None
    answerText: Optional[str] = None

class GradeRequest(BaseModel):
    # Left untyped so that "marks must be a number" is reported by the service.
    marks: Optional[Any] = None
    feedback: Optional[str] = None

class EvaluateRequest(BaseModel):
    submissionId: Optional[str] = None
    marks: Optional[Any] = None

# --- Response Models ---

class Assignment(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    courseId: str
    createdBy: str
    teacherName: Optional[str] = None
    dueDate: datetime
    createdAt: Optional[datetime] = None

class AssignmentCreateResponse(BaseModel):
    message: str
    assignmentId: str

class CourseAssignmentsResponse(BaseModel):
    message: str
    assignments: List[Assignment]
    totalAssignments: int

class AssignmentSubmitResponse(BaseModel):
    message: str
    submissionId: str

class Submission(BaseModel):
    id: str
    assignmentId: str
    studentId: str
    studentName: Optional[str] = None
    studentEmail: Optional[str] = None
    answerText: str
    marks: Optional[float] = None
    feedback: Optional[str] = None
    status: SubmissionStatus
    submittedAt: Optional[datetime] = None
    evaluatedAt: Optional[datetime] = None
    gradedAt: Optional[datetime] = None

class SubmissionResponse(BaseModel):
    message: str
    submission: Optional[Submission] = None

class SubmissionListResponse(BaseModel):
    message: str
    submissions: List[Submission]
    totalSubmissions: int
