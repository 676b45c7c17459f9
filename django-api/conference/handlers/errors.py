"""Maps domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]; anything that is not a
DomainError goes to DRF's default handler.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from conference.domain.errors import DomainError, ErrorKind

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_402_PAYMENT_REQUIRED,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=STATUS_BY_KIND[error.kind],
    )


def exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return error_response(exc)

    return drf_exception_handler(exc, context)
