from django.http import JsonResponse
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny

from apps.common.exceptions import ErrorCode
from apps.common.responses import success_response, error_body


@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness probe (for Render)."""
    return success_response({'status': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse(error_body(ErrorCode.NOT_FOUND, 'Not found'), status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse(
        error_body(ErrorCode.INTERNAL_ERROR, 'An unexpected error occurred'),
        status=500,
    )
