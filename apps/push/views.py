from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.common.responses import created_response
from .serializers import RegisterPushTokenSerializer, PushRegistrationSerializer
from .services import register_token


@extend_schema(
    request=RegisterPushTokenSerializer,
    responses={201: PushRegistrationSerializer},
    description="Register a device push token for the current user.",
    tags=['push'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def register(request):
    """POST /api/v1/push/register"""
    serializer = RegisterPushTokenSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    register_token(user=request.user, **serializer.validated_data)
    return created_response({'registered': True})
