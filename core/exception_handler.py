"""Maps domain errors to HTTP responses for every DRF view."""

import logging

from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.errors import DomainError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.EXPIRED: status.HTTP_410_GONE,
}


def error_body(code: str, message: str, details=None) -> dict:
    body = {"code": code, "message": message}
    if details is not None:
        body["details"] = details
    return {"error": body}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        logger.info("Request rejected: %s", exc)
        return Response(
            error_body(exc.code.value, exc.message),
            status=STATUS_BY_KIND[exc.kind],
        )

    response = exception_handler(exc, context)
    if response is not None and isinstance(exc, ValidationError):
        # Serializer errors share the domain error envelope.
        response.data = error_body(
            ErrorKind.VALIDATION_FAILED.value, "Invalid request", details=response.data
        )
    return response
