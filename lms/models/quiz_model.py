# /lms/models/quiz_model.py

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Optional, List

# --- Authoring ---

class TestCreate(BaseModel):
    __test__ = False

    title: Optional[str] = None
    courseId: Optional[str] = None

class TestCreateResponse(BaseModel):
    __test__ = False

    message: str
    testId: str

class QuestionCreate(BaseModel):
    testId: Optional[str] = None
    questionText: Optional[str] = None
    options: Optional[List[str]] = Field(default=None, description="Ordered answer choices, normally four.")
    correctAnswer: Optional[str] = Field(default=None, description="Must equal one of the options exactly.")

class QuestionCreateResponse(BaseModel):
    message: str
    questionId: str

# --- Delivery (answers hidden) ---

class TestSummary(BaseModel):
    __test__ = False

    id: str
    title: str

class CourseTestsResponse(BaseModel):
    message: str
    courseId: str
    tests: List[TestSummary]

class TestInfo(BaseModel):
    __test__ = False

    id: str
    title: str
    courseId: str

class StudentQuestion(BaseModel):
    """A question as a student sees it: no correct answer."""
    id: str
    testId: str
    questionText: str
    options: List[str]

class TestForStudentResponse(BaseModel):
    __test__ = False

    message: str
    test: TestInfo
    questions: List[StudentQuestion]
    totalQuestions: int

# --- Submission & Grading ---

class AnswerIn(BaseModel):
    questionId: Optional[str] = None
    selectedAnswer: Optional[str] = None

class TestSubmission(BaseModel):
    __test__ = False

    testId: Optional[str] = None
    answers: Optional[List[AnswerIn]] = None

class ProcessedAnswer(BaseModel):
    questionId: Optional[str] = None
    selectedAnswer: Optional[str] = None
    isCorrect: bool

class TestResultSummary(BaseModel):
    __test__ = False

    id: str
    score: int
    correctAnswers: int
    totalQuestions: int

class TestSubmitResponse(BaseModel):
    __test__ = False

    message: str
    testResult: TestResultSummary
    score: int
    correctAnswers: int
    totalQuestions: int
    answers: List[ProcessedAnswer]

class ResultRow(BaseModel):
    id: str
    studentId: str
    studentName: str
    studentEmail: str
    score: int
    correctAnswers: int
    totalQuestions: int = Field(..., description="Length of the answers stored with this attempt.")
    submittedAt: Optional[datetime] = None

class TestResultsResponse(BaseModel):
    __test__ = False

    message: str
    testId: str
    testTitle: str
    results: List[ResultRow]
    totalResults: int
    averageScore: Optional[int] = None
