# /lms/services/certificate_service.py

"""
Course-completion certificates.

A certificate is available once the student has watched every lecture of
the course. It is rendered to PDF on demand and never stored, so it can be
downloaded again at any time and carries no identifier of its own.
"""

import io
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from ..core import errors
from .database_service import DatabaseService
from .progress_helpers import calculations

logger = logging.getLogger(__name__)

REQUIRED_COMPLETION = 100
FOOTER_TEXT = (
    "This certificate is awarded in recognition of the successful "
    "completion of all course requirements."
)

_INK = colors.HexColor("#2c3e50")
_BODY = colors.HexColor("#34495e")
_MUTED = colors.HexColor("#7f8c8d")


@dataclass(frozen=True)
class CertificateEligibility:
    allowed: bool
    completion_percent: int
    lectures_total: int
    lectures_watched: int


def can_issue_certificate(student_id: str, course_id: str, db: DatabaseService) -> CertificateEligibility:
    lecture_ids = db.get_lecture_ids_by_course(course_id)
    total = len(lecture_ids)
    watched = db.count_watched_lectures(student_id, lecture_ids)
    percent = calculations.completion_percent(total, watched)
    return CertificateEligibility(
        allowed=percent >= REQUIRED_COMPLETION,
        completion_percent=percent,
        lectures_total=total,
        lectures_watched=watched,
    )


def format_long_date(day: date) -> str:
    """e.g. "March 5, 2026"."""
    return f"{day:%B} {day.day}, {day.year}"


def render_certificate_pdf(student_name: str, course_title: str, issued_on: date) -> bytes:
    buffer = io.BytesIO()
    # Uncompressed page streams keep the certificate text greppable.
    pdf = canvas.Canvas(buffer, pagesize=A4, pageCompression=0)
    pdf.setTitle(f"Certificate of Completion - {course_title}")
    width, height = A4
    margin = 50
    center = width / 2
    y = height - 100

    pdf.setStrokeColor(_INK)
    pdf.setLineWidth(3)
    pdf.line(margin, y, width - margin, y)
    y -= 60

    pdf.setFillColor(_INK)
    pdf.setFont("Helvetica-Bold", 36)
    pdf.drawCentredString(center, y, "Certificate of Completion")
    y -= 70

    pdf.setFillColor(_BODY)
    pdf.setFont("Helvetica", 14)
    pdf.drawCentredString(center, y, "This is to certify that")
    y -= 45

    pdf.setFillColor(_INK)
    pdf.setFont("Helvetica-Bold", 24)
    pdf.drawCentredString(center, y, student_name)
    name_width = pdf.stringWidth(student_name, "Helvetica-Bold", 24)
    pdf.setLineWidth(1)
    pdf.line(center - name_width / 2, y - 4, center + name_width / 2, y - 4)
    y -= 45

    pdf.setFillColor(_BODY)
    pdf.setFont("Helvetica", 12)
    pdf.drawCentredString(center, y, "has successfully completed the course")
    y -= 30

    pdf.setFillColor(_INK)
    pdf.setFont("Helvetica-Oblique", 16)
    pdf.drawCentredString(center, y, course_title)
    y -= 55

    pdf.setFillColor(_BODY)
    pdf.setFont("Helvetica", 11)
    pdf.drawCentredString(center, y, f"Completed on: {format_long_date(issued_on)}")
    y -= 40

    pdf.setLineWidth(3)
    pdf.line(margin, y, width - margin, y)
    y -= 25

    pdf.setFillColor(_MUTED)
    pdf.setFont("Helvetica", 9)
    pdf.drawCentredString(center, y, FOOTER_TEXT)

    pdf.showPage()
    pdf.save()
    buffer.seek(0)
    return buffer.read()


def certificate_filename(course_id: str, student_id: str) -> str:
    return f"certificate-{course_id}-{student_id}.pdf"


def issue_certificate(
    student_id: str,
    course_id: str,
    db: DatabaseService,
    issued_on: Optional[date] = None,
) -> Tuple[bytes, str]:
    """
    Renders the certificate for a student who has completed a course.

    Returns the PDF bytes and the download filename. Raises NotFoundError for
    an unknown course or student and CompletionRequiredError, carrying the
    current percentage, while lectures remain unwatched.
    """
    course = db.get_course_by_id(course_id)
    if course is None:
        raise errors.NotFoundError("Course not found")
    student = db.get_user_by_id(student_id)
    if student is None:
        raise errors.NotFoundError("Student not found")

    eligibility = can_issue_certificate(student_id, course_id, db)
    logger.info(
        "Certificate check for student %s course %s: %d/%d (%d%%)",
        student_id, course_id, eligibility.lectures_watched, eligibility.lectures_total, eligibility.completion_percent,
    )
    if not eligibility.allowed:
        raise errors.CompletionRequiredError(eligibility.completion_percent, REQUIRED_COMPLETION)

    pdf_bytes = render_certificate_pdf(student.name, course.title, issued_on or date.today())
    logger.info("Certificate generated for student %s in course %s", student_id, course_id)
    return pdf_bytes, certificate_filename(course_id, student_id)
