"""Maps domain errors and DRF exceptions to the response envelope.

Handlers never expose internal error details: anything that is not a
domain error or a DRF API exception is logged and reported as a generic
server error.
"""

import logging

from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

from common.errors import DomainError
from common.responses import failure

logger = logging.getLogger(__name__)

NOT_AUTHENTICATED_MESSAGE = "Please login to access this resource"
GENERIC_ERROR_MESSAGE = "Something went wrong!"


def _first_message(detail) -> str:
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return "Validation Error"
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else "Validation Error"
    return str(detail)


def envelope_exception_handler(exc: Exception, context: dict) -> Response:
    if isinstance(exc, DomainError):
        extra = dict(exc.context or {})
        return failure(exc.message, status_code=exc.http_status, **extra)

    if isinstance(exc, Http404):
        return failure("Resource not found", status_code=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, exceptions.NotAuthenticated):
        return failure(NOT_AUTHENTICATED_MESSAGE, status_code=status.HTTP_401_UNAUTHORIZED)

    if isinstance(exc, exceptions.ValidationError):
        return failure(
            _first_message(exc.detail),
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=exc.detail,
        )

    if isinstance(exc, exceptions.APIException):
        response = failure(str(exc.detail), status_code=exc.status_code)
        if isinstance(exc, exceptions.AuthenticationFailed):
            response["WWW-Authenticate"] = 'Bearer realm="api"'
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
    return failure(GENERIC_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
