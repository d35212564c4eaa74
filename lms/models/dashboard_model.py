# /lms/models/dashboard_model.py

# --- Core Imports ---
from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, List

from .user_model import UserSummary

# --- Role Dashboards ---

class StudentDashboard(BaseModel):
    """
    The summary cards shown on the student home page.
    """
    message: str = "Student dashboard retrieved successfully"
    studentId: str

    totalEnrolledCourses: int = Field(..., description="Courses the student is enrolled in.", examples=[3])

    # Always 0 until a course-completion definition exists for the dashboard.
    completedCourses: int = Field(0, description="Placeholder; currently always 0.")

    averageQuizScore: Optional[int] = Field(
        None,
        description="Rounded mean over every test attempt the student has made; null when none.",
        examples=[72],
    )

    pendingAssignments: int = Field(
        ...,
        description="Submissions by this student in enrolled courses that have not been graded yet.",
        examples=[1],
    )


class TeacherDashboard(BaseModel):
    """
    The summary cards shown on the teacher home page.
    """
    message: str = "Teacher dashboard retrieved successfully"
    teacherId: str
    totalCoursesCreated: int = Field(..., examples=[4])
    totalStudentsEnrolled: int = Field(..., description="Distinct students across the teacher's courses.", examples=[112])
    pendingSubmissions: int = Field(..., description="Ungraded submissions on the teacher's own assignments.")
    totalQuizzesCreated: int


# --- Admin Console ---

class AdminStats(BaseModel):
    message: str = "Admin stats retrieved successfully"
    adminId: str
    totalUsers: int
    totalStudents: int
    totalTeachers: int
    totalCourses: int
    totalEnrollments: int

class TeacherWithCount(BaseModel):
    id: str
    name: str
    email: str
    courseCount: int
    createdAt: Optional[datetime] = None

class TeacherListResponse(BaseModel):
    message: str
    count: int
    teachers: List[TeacherWithCount]

class AdminCourse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    teacherId: Optional[str] = None
    teacherName: str
    teacherEmail: str
    createdAt: Optional[datetime] = None

class AdminCourseListResponse(BaseModel):
    message: str
    count: int
    courses: List[AdminCourse]

class StudentEnrollment(BaseModel):
    id: str
    studentId: str
    studentName: str
    studentEmail: str
    courseId: str
    courseName: str
    createdAt: Optional[datetime] = None

class CourseEnrollmentCount(BaseModel):
    courseId: str
    courseName: str
    studentCount: int

class AdminEnrollmentsResponse(BaseModel):
    message: str
    totalEnrollments: int
    enrollmentsByStudents: List[StudentEnrollment]
    enrollmentsByCourse: List[CourseEnrollmentCount]

class AdminCreateResponse(BaseModel):
    message: str
    admin: UserSummary

class DeletedUser(BaseModel):
    id: str
    name: str
    email: str
    role: str

class DeleteUserResponse(BaseModel):
    message: str
    deletedUser: DeletedUser
