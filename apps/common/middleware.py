"""Request logging middleware."""
import logging

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Log one line per request: method, path, status and, for 4xx/5xx, the
    envelope error code. Request bodies and headers are never logged.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        status_code = response.status_code
        error_code = self._error_code(response) if status_code >= 400 else None

        if error_code:
            logger.info("%s %s %s %s", request.method, request.path, status_code, error_code)
        else:
            logger.info("%s %s %s", request.method, request.path, status_code)

        return response

    @staticmethod
    def _error_code(response):
        data = getattr(response, 'data', None)
        if isinstance(data, dict) and isinstance(data.get('error'), dict):
            return data['error'].get('code')
        return None
