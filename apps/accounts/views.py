from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from drf_spectacular.utils import extend_schema

from apps.common.responses import success_response, created_response
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    TokenRefreshInputSerializer,
    UserMinimalSerializer,
    UserSerializer,
    AuthSessionSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    get_user_profile,
    issue_tokens,
    refresh_session,
)


def _session_payload(user, tokens):
    return {'user': UserMinimalSerializer(user).data, **tokens}


@extend_schema(
    request=UserRegistrationSerializer,
    responses={201: AuthSessionSerializer},
    description="Register a new account and receive an access/refresh token pair.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = register_user(**serializer.validated_data)

    return created_response(_session_payload(user, issue_tokens(user)))


@extend_schema(
    request=UserLoginSerializer,
    responses={200: AuthSessionSerializer},
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate_user(**serializer.validated_data)

    return success_response(_session_payload(user, issue_tokens(user)))


@extend_schema(
    request=TokenRefreshInputSerializer,
    responses={200: AuthSessionSerializer},
    description="Exchange a refresh token for a new token pair. The old refresh token is revoked.",
    tags=['auth'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def refresh(request):
    """Rotate the refresh token."""
    serializer = TokenRefreshInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user, tokens = refresh_session(refresh_token=serializer.validated_data['refreshToken'])

    return success_response(_session_payload(user, tokens))


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me(request):
    """Get current authenticated user profile."""
    user = get_user_profile(user_id=request.user.id)
    return success_response(UserSerializer(user).data)
