"""
Error codes, base service exceptions and the DRF exception handler.

Services raise subclasses of ``ServiceError``; the handler turns those, DRF's
own exceptions and Django's ``Http404``/``PermissionDenied`` into the error
envelope ``{"error": {"code": ..., "message": ...}}``.
"""
import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler
from rest_framework_simplejwt.exceptions import InvalidToken

from .responses import error_body

logger = logging.getLogger(__name__)


class ErrorCode:
    VALIDATION_ERROR = 'VALIDATION_ERROR'
    UNAUTHORIZED = 'UNAUTHORIZED'
    FORBIDDEN = 'FORBIDDEN'
    NOT_FOUND = 'NOT_FOUND'
    CONFLICT = 'CONFLICT'
    METHOD_NOT_ALLOWED = 'METHOD_NOT_ALLOWED'
    INTERNAL_ERROR = 'INTERNAL_ERROR'


STATUS_TO_CODE = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION_ERROR,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.UNAUTHORIZED,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
    status.HTTP_409_CONFLICT: ErrorCode.CONFLICT,
}

DEFAULT_ERROR_MESSAGE = 'An unexpected error occurred'


class ServiceError(exceptions.APIException):
    """Base exception for all service-layer errors."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = DEFAULT_ERROR_MESSAGE
    default_code = ErrorCode.INTERNAL_ERROR


class InvalidInputError(ServiceError):
    """Request body or parameters failed validation."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Validation failed'
    default_code = ErrorCode.VALIDATION_ERROR


class UnauthorizedError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Unauthorized'
    default_code = ErrorCode.UNAUTHORIZED


class ForbiddenError(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Forbidden'
    default_code = ErrorCode.FORBIDDEN


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found'
    default_code = ErrorCode.NOT_FOUND


class ConflictError(ServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflict'
    default_code = ErrorCode.CONFLICT


def first_error_message(detail) -> str:
    """
    Flatten a DRF error detail to its first message.

    Validation errors come back as nested dicts/lists; clients only show one
    line, so the first leaf wins.
    """
    if isinstance(detail, dict):
        if 'detail' in detail:
            return first_error_message(detail['detail'])
        for value in detail.values():
            return first_error_message(value)
        return 'Validation failed'
    if isinstance(detail, (list, tuple)):
        if not detail:
            return 'Validation failed'
        return first_error_message(detail[0])
    return str(detail)


def _error_code_for(exc, status_code: int) -> str:
    if isinstance(exc, ServiceError):
        return exc.default_code
    if status_code >= 500:
        return ErrorCode.INTERNAL_ERROR
    return STATUS_TO_CODE.get(status_code, ErrorCode.VALIDATION_ERROR)


def _message_for(exc) -> str:
    if isinstance(exc, exceptions.NotAuthenticated):
        return 'Missing or invalid authorization header'
    if isinstance(exc, (InvalidToken, exceptions.AuthenticationFailed)):
        return 'Token expired or invalid'
    return first_error_message(exc.detail)


def envelope_exception_handler(exc, context):
    """
    DRF ``EXCEPTION_HANDLER`` producing the error envelope.

    Unhandled exceptions are logged and reported as ``INTERNAL_ERROR`` with
    a generic message instead of propagating.
    """
    if isinstance(exc, Http404):
        exc = exceptions.NotFound('Not found')
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied('Forbidden')

    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'view'
        )
        return Response(
            error_body(ErrorCode.INTERNAL_ERROR, DEFAULT_ERROR_MESSAGE),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response.data = error_body(
        _error_code_for(exc, response.status_code),
        _message_for(exc),
    )
    return response
