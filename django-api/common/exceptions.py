"""Map domain errors to HTTP responses.

Only the error code and the user-safe message leave the process.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from common.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_CATEGORY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_BOOKING_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_UPLOAD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATUS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WRONG_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VERIFICATION_REJECTED: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ACCOUNT_DISABLED: status.HTTP_403_FORBIDDEN,
    ErrorCode.BOOKING_NOT_ALLOWED: status.HTTP_403_FORBIDDEN,
    ErrorCode.EMAIL_TAKEN: status.HTTP_409_CONFLICT,
    ErrorCode.VERIFICATION_NOT_ALLOWED: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.BOOKING_ALREADY_CANCELLED: status.HTTP_409_CONFLICT,
    ErrorCode.TICKETS_NOT_AVAILABLE: status.HTTP_409_CONFLICT,
    ErrorCode.PERSISTENCE_FAILED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_body(code: str, message: str) -> dict:
    return {"error": {"code": code, "message": message}}


def domain_exception_handler(exc, context):
    """Render domain errors and DRF errors as ``{"error": {"code", "message"}}``."""
    if isinstance(exc, DomainError):
        status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        if status_code >= 500:
            logger.warning("Request failed: %s", exc)
        return Response(error_body(exc.code.value, exc.message), status=status_code)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        body = error_body("VALIDATION_ERROR", _first_message(response.data))
        body["error"]["fields"] = response.data
    else:
        detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
        body = error_body(str(getattr(detail, "code", "error")).upper(), str(detail))
    response.data = body
    return response


def _first_message(data) -> str:
    if isinstance(data, dict):
        data = next(iter(data.values()), "")
    if isinstance(data, list):
        return _first_message(data[0]) if data else "Invalid input."
    return str(data) or "Invalid input."
