# /lms/core/errors.py

"""
The error taxonomy shared by every service.

Services raise these exceptions for business-rule violations; routers turn
them into `HTTPException`s with `to_http_exception`, and `main.py` renders
every error body as `{"message": ...}`. Note that conflicts (duplicate
enrollment, duplicate submission, duplicate email) map to 400, not 409.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class LMSError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def payload(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(LMSError, ValueError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(LMSError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(LMSError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(LMSError, LookupError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(LMSError):
    status_code = status.HTTP_400_BAD_REQUEST


class CompletionRequiredError(ValidationError):
    """Raised when a certificate is requested before every lecture is watched."""

    def __init__(self, completion_percent: int, required: int = 100):
        super().__init__("Complete the course to generate certificate")
        self.completion_percent = completion_percent
        self.required = required

    def payload(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "completionPercent": self.completion_percent,
            "required": self.required,
        }


def to_http_exception(exc: LMSError, headers: Optional[Dict[str, str]] = None) -> HTTPException:
    """Converts a domain error into the HTTPException the router raises."""
    return HTTPException(status_code=exc.status_code, detail=exc.payload(), headers=headers)


def internal_error(message: str, exc: Optional[Exception] = None) -> HTTPException:
    detail: Dict[str, Any] = {"message": message}
    if exc is not None:
        detail["error"] = str(exc)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
