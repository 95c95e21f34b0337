"""
Uniform response envelope shared by every API endpoint.

Success: ``{"data": ..., "meta"?: {...}}``
Error:   ``{"error": {"code": ..., "message": ...}}``
"""

from typing import Any, Optional

from rest_framework import status
from rest_framework.response import Response


def envelope(data: Any, meta: Optional[dict] = None) -> dict:
    """Build the success body."""
    body = {'data': data}
    if meta:
        body['meta'] = meta
    return body


def error_body(code: str, message: str) -> dict:
    """Build the error body."""
    return {'error': {'code': code, 'message': message}}


def success_response(
    data: Any,
    meta: Optional[dict] = None,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    """Return a DRF Response wrapped in the success envelope."""
    return Response(envelope(data, meta), status=status_code)


def created_response(data: Any) -> Response:
    return success_response(data, status_code=status.HTTP_201_CREATED)


def no_content_response() -> Response:
    return Response(status=status.HTTP_204_NO_CONTENT)
