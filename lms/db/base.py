# /lms/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic runs its auto-generation scan and when the app creates tables.

# Import the Base class that all models inherit from.
from .base_class import Base

# Import all of our model classes from their respective files.
from .models.user_models import User
from .models.course_models import Course, Enrollment, Lecture
from .models.progress_models import WatchTime, Progress
from .models.quiz_models import Test, Question, TestResult
from .models.assignment_models import Assignment, AssignmentSubmission
