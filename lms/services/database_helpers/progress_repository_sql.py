# /lms/services/database_helpers/progress_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the WatchTime and
Progress tables: the two independent ledgers of a student's lecture
activity.
"""

from typing import List, Dict, Optional, Iterable, Tuple
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lms.db.base_class import utcnow
from lms.db.models.progress_models import WatchTime, Progress


class ProgressRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Watch Time Methods ---

    def get_watch_time(self, student_id: str, lecture_id: str) -> Optional[WatchTime]:
        return (
            self.db.query(WatchTime)
            .filter(WatchTime.student_id == student_id, WatchTime.lecture_id == lecture_id)
            .first()
        )

    def upsert_watch_time(self, record: Dict) -> Tuple[WatchTime, bool]:
        """
        Saves a playback position. Updates the existing row for
        (student_id, lecture_id) in place, or inserts `record` as a new row.

        Returns the saved row and whether it was newly created. If a
        concurrent request inserted the row first, the unique constraint
        rejects our insert and we fall back to updating the winner's row.
        """
        existing = self.get_watch_time(record["student_id"], record["lecture_id"])
        if existing:
            return self._update_position(existing, record["current_time"]), False

        new_watch_time = WatchTime(**record)
        self.db.add(new_watch_time)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            existing = self.get_watch_time(record["student_id"], record["lecture_id"])
            if existing is None:
                # Not a lost race: the row itself was rejected.
                raise
            return self._update_position(existing, record["current_time"]), False
        self.db.refresh(new_watch_time)
        return new_watch_time, True

    def _update_position(self, watch_time: WatchTime, current_time: float) -> WatchTime:
        watch_time.current_time = current_time
        watch_time.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(watch_time)
        return watch_time

    def count_watched_lectures(self, student_id: str, lecture_ids: Iterable[str]) -> int:
        """
        Counts the lectures among `lecture_ids` for which the student has at
        least one watch-time row. A row with a position of 0 still counts.
        """
        ids = list(lecture_ids)
        if not ids:
            return 0
        return (
            self.db.query(func.count(func.distinct(WatchTime.lecture_id)))
            .filter(WatchTime.student_id == student_id, WatchTime.lecture_id.in_(ids))
            .scalar()
        ) or 0

    # --- Progress (mark complete) Methods ---

    def add_progress(self, record: Dict) -> Progress:
        new_progress = Progress(**record)
        self.db.add(new_progress)
        self.db.commit()
        self.db.refresh(new_progress)
        return new_progress

    def get_completed_lecture_ids(self, student_id: str, course_id: str) -> List[str]:
        """Distinct lecture ids the student has marked complete in a course."""
        rows = (
            self.db.query(Progress.lecture_id)
            .filter(
                Progress.student_id == student_id,
                Progress.course_id == course_id,
                Progress.completed.is_(True),
            )
            .distinct()
            .all()
        )
        return [row.lecture_id for row in rows]
