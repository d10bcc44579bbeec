"""Maps domain errors to HTTP responses.

Installed as the DRF ``EXCEPTION_HANDLER``. Only the error code and the
user-safe message are exposed.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from events.domain.errors import DomainError, ErrorCode

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_TYPE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.NOTIFICATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_USER_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TICKET_TYPE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_PUBLISHED: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    ErrorCode.TICKET_UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorCode.CONCURRENCY_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_STATUS_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_LOCKED: status.HTTP_409_CONFLICT,
    ErrorCode.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return Response(
            {"code": exc.code.value, "message": exc.message},
            status=STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        )
    return exception_handler(exc, context)
