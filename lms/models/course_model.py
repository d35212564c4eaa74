# /lms/models/course_model.py

# --- Core Imports ---
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List

# --- Request Models ---
# Request fields are optional at the schema level so that a missing field is
# reported by the service with its own message instead of a generic schema error.

class CourseCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None

class EnrollRequest(BaseModel):
    courseId: Optional[str] = None

class LectureCreate(BaseModel):
    courseId: Optional[str] = None
    title: Optional[str] = None
    videoUrl: Optional[str] = None
    order: Optional[int] = Field(default=None, description="Display position; defaults to 1.")

# --- Response Models ---

class Course(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    teacherId: Optional[str] = None
    teacherName: Optional[str] = None
    createdAt: Optional[datetime] = None

class CourseResponse(BaseModel):
    message: str
    course: Course

class CourseListResponse(BaseModel):
    message: str
    courses: List[Course]

class Enrollment(BaseModel):
    id: str
    studentId: str
    courseId: str
    studentName: Optional[str] = None
    studentEmail: Optional[str] = None
    createdAt: Optional[datetime] = None

class EnrollmentResponse(BaseModel):
    message: str
    enrollment: Enrollment

class CourseEnrollmentsResponse(BaseModel):
    message: str
    courseId: str
    enrollments: List[Enrollment]
    count: int

class Lecture(BaseModel):
    id: str
    courseId: str
    title: str
    videoUrl: str
    order: int

class LectureResponse(BaseModel):
    message: str
    lecture: Lecture

class LectureListResponse(BaseModel):
    message: str
    courseId: str
    lectureCount: int
    lectures: List[Lecture]
