# /lms/models/progress_model.py

"""
Data contracts for the watch-time tracker and the progress endpoints,
including the per-course progress summary.
"""

from pydantic import BaseModel, Field
from typing import Optional, Any

# --- Watch Time ---

class WatchTimeSave(BaseModel):
    lectureId: Optional[str] = None
    # Validated by the service so that a non-numeric value gets a readable message.
    currentTime: Optional[Any] = None

class WatchTime(BaseModel):
    studentId: str
    lectureId: str
    currentTime: float

class WatchTimeSaveResponse(BaseModel):
    message: str
    watchTime: WatchTime

class WatchTimeResponse(BaseModel):
    message: str
    lectureId: str
    currentTime: float = Field(..., description="Seconds into the video; 0 means start from the beginning.")

class CourseWatchStatsResponse(BaseModel):
    message: str
    courseId: str
    lecturesTotal: int
    lecturesWatched: int
    completionPercent: int

# --- Mark Complete ---

class MarkCompleteRequest(BaseModel):
    courseId: Optional[str] = None
    lectureId: Optional[str] = None

class ProgressRecord(BaseModel):
    studentId: str
    courseId: str
    lectureId: str
    completed: bool

class MarkCompleteResponse(BaseModel):
    message: str
    progress: ProgressRecord

class CourseProgressResponse(BaseModel):
    message: str
    courseId: str
    studentId: str
    totalLectures: int
    completedLectures: int
    progressPercentage: int

# --- Progress Summary ---

class LectureStats(BaseModel):
    total: int
    watched: int

class QuizStats(BaseModel):
    averageScore: Optional[int] = Field(
        None,
        description="Rounded mean score of the student's attempts in this course; null when never attempted.",
    )
    attempted: int

class AssignmentStats(BaseModel):
    submitted: int
    graded: int

class ProgressSummary(BaseModel):
    """
    The denormalized summary for one student in one course. Only the lecture
    component feeds `completionPercent`; quizzes and assignments are reported
    alongside it.
    """
    message: str = "Progress summary retrieved successfully"
    courseId: str
    studentId: str
    lectures: LectureStats
    quizzes: QuizStats
    assignments: AssignmentStats
    completionPercent: int = Field(..., examples=[80])
