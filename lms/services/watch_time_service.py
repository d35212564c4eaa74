# /lms/services/watch_time_service.py

"""
Tracks how far into each lecture video a student has played.

There is at most one watch-time row per (student, lecture); saving again
overwrites the position. The existence of a row, whatever its position, is
what the progress summary and the certificate gate count as "watched".
"""

import logging
import math
import numbers
import uuid
from typing import Any, Dict, Tuple

from ..core import errors
from .database_service import DatabaseService
from .progress_helpers import calculations

logger = logging.getLogger(__name__)


def _validate_position(current_time: Any) -> float:
    # bool is an int subclass but is not a playback position.
    if isinstance(current_time, bool) or not isinstance(current_time, numbers.Real):
        raise errors.ValidationError("currentTime must be a non-negative number")
    if not math.isfinite(current_time) or current_time < 0:
        raise errors.ValidationError("currentTime must be a non-negative number")
    return float(current_time)


def save_watch_time(student_id: str, lecture_id: str, current_time: Any, db: DatabaseService) -> Tuple[Dict, bool]:
    """
    Upserts the student's position in a lecture.

    Returns the saved record and True when a new row was created, False when
    an existing one was updated.
    """
    if not lecture_id or current_time is None:
        raise errors.ValidationError("Please provide lectureId and currentTime")
    position = _validate_position(current_time)

    watch_time, created = db.upsert_watch_time({
        "id": f"wt_{uuid.uuid4().hex[:12]}",
        "student_id": student_id,
        "lecture_id": lecture_id,
        "current_time": position,
    })
    logger.info(
        "Watch time %s for student %s lecture %s at %.1fs",
        "created" if created else "updated", student_id, lecture_id, position,
    )
    record = {
        "studentId": watch_time.student_id,
        "lectureId": watch_time.lecture_id,
        "currentTime": watch_time.current_time,
    }
    return record, created


def get_watch_time(student_id: str, lecture_id: str, db: DatabaseService) -> Tuple[float, bool]:
    """
    The saved position in seconds and whether a record exists. A lecture the
    student has never played resumes from 0.
    """
    watch_time = db.get_watch_time(student_id, lecture_id)
    if watch_time is None:
        return 0, False
    return watch_time.current_time, True


def count_watched_lectures(student_id: str, course_id: str, db: DatabaseService) -> Dict:
    lecture_ids = db.get_lecture_ids_by_course(course_id)
    lectures_total = len(lecture_ids)
    lectures_watched = db.count_watched_lectures(student_id, lecture_ids)
    return {
        "courseId": course_id,
        "lecturesTotal": lectures_total,
        "lecturesWatched": lectures_watched,
        "completionPercent": calculations.completion_percent(lectures_total, lectures_watched),
    }
