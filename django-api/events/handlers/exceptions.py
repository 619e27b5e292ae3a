"""Maps domain errors and validation failures to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Response bodies never
carry internal details, only the error code and a user-safe message.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_QUANTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MISSING_INFORMATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PAYMENT_INFORMATION_REQUIRED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_MISMATCH: status.HTTP_400_BAD_REQUEST,
}


def error_body(code: str, message: str, **extra) -> dict:
    return {"error": {"code": code, "message": message, **extra}}


def storefront_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        extra = {}
        fields = getattr(exc, "fields", None)
        if fields:
            extra["fields"] = list(fields)
        logger.info("Request failed with %s", exc.code.value)
        return Response(
            error_body(exc.code.value, exc.message, **extra),
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        )

    response = exception_handler(exc, context)
    if response is None:
        return None
    if isinstance(exc, ValidationError):
        response.data = error_body(
            "VALIDATION_ERROR", "Invalid request.", details=response.data
        )
    else:
        response.data = error_body(
            "REQUEST_ERROR", str(response.data.get("detail", "Request failed."))
        )
    return response
