"""
exceptions.py — DRF exception handler for service-layer errors.

Wired through REST_FRAMEWORK["EXCEPTION_HANDLER"]. Service errors become

    {"name": "<ErrorClass>", "detail": "<message>"}

with a status code per error type. Anything else (serializer validation,
authentication, 404 from routing) goes through DRF's default handler.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .errors import (
    AuthError,
    InvalidArgumentError,
    RecordNotFoundError,
    ServiceError,
    UniquenessError,
)

logger = logging.getLogger(__name__)

# Most specific first: RecordNotFoundError is also an InvalidArgumentError.
STATUS_BY_ERROR = (
    (RecordNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (UniquenessError, status.HTTP_409_CONFLICT),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
)


def status_for(exc: ServiceError) -> int:
    for error_cls, code in STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def service_exception_handler(exc, context):
    if not isinstance(exc, ServiceError):
        return exception_handler(exc, context)

    code = status_for(exc)
    view = context.get("view")
    logger.info(
        "%s in %s: %s", exc.name, type(view).__name__ if view else "unknown view", exc.message
    )
    return Response({"name": exc.name, "detail": exc.message}, status=code)
