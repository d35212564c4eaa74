# /lms/services/progress_helpers/calculations.py

"""
Pure arithmetic shared by the progress summary, the watch-time tracker, the
quiz engine, the dashboards and the certificate gate.

Percentages are rounded half-up (12.5 -> 13), matching the rounding the
client applications have always displayed. Python's built-in `round` rounds
half to even and must not be used for these values.
"""

import math
from typing import Iterable, Optional


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def completion_percent(lectures_total: int, lectures_watched: int) -> int:
    """
    Share of a course's lectures the student has watched, as a whole
    percentage. A course with no lectures is 0% complete.
    """
    if lectures_total <= 0:
        return 0
    return round_half_up(lectures_watched / lectures_total * 100)


def percentage_score(correct: int, total: int) -> int:
    """Quiz score. `total` is the test's question count, not the answers sent."""
    if total <= 0:
        return 0
    return round_half_up(correct / total * 100)


def average_score(scores: Iterable[float]) -> Optional[int]:
    """
    Rounded mean of the given scores, or None when there are none.

    None means "never attempted" and is deliberately distinct from an
    average of 0.
    """
    values = list(scores)
    if not values:
        return None
    return round_half_up(sum(values) / len(values))
