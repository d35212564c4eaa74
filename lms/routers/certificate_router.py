# /lms/routers/certificate_router.py

import logging

from fastapi import APIRouter, Depends, Response

from ..core import errors
from ..core.deps import require_student
from ..models.user_model import AuthContext
from ..services import certificate_service
from ..services.database_service import DatabaseService, get_db_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get(
    "/course/{course_id}",
    summary="Download a Course Completion Certificate",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
def get_certificate(course_id: str, ctx: AuthContext = Depends(require_student), db: DatabaseService = Depends(get_db_service)):
    try:
        pdf_bytes, filename = certificate_service.issue_certificate(ctx.user_id, course_id, db=db)
    except errors.LMSError as e:
        raise errors.to_http_exception(e)
    except Exception as e:
        logger.exception("Certificate generation failed")
        raise errors.internal_error("Error generating certificate", e)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
