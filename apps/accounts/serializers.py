from rest_framework import serializers
from .models import User


EMAIL_MAX_LENGTH = 255
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128
REFRESH_TOKEN_MAX_LENGTH = 1024

CREDENTIALS_REQUIRED = 'Email and password are required'


# =============================================================================
# Input Serializers
# =============================================================================

class CredentialsSerializer(serializers.Serializer):
    """Email + password body shared by login and registration."""

    email = serializers.CharField(
        max_length=EMAIL_MAX_LENGTH,
        error_messages={
            'required': CREDENTIALS_REQUIRED,
            'blank': CREDENTIALS_REQUIRED,
            'null': CREDENTIALS_REQUIRED,
            'max_length': 'Email too long',
        },
    )
    password = serializers.CharField(
        max_length=PASSWORD_MAX_LENGTH,
        trim_whitespace=False,
        style={'input_type': 'password'},
        error_messages={
            'required': CREDENTIALS_REQUIRED,
            'blank': CREDENTIALS_REQUIRED,
            'null': CREDENTIALS_REQUIRED,
            'max_length': 'Password too long',
        },
    )

    def validate_email(self, value):
        return value.strip().lower()


class UserRegistrationSerializer(CredentialsSerializer):
    """Serializer for user registration."""

    def validate_email(self, value):
        value = super().validate_email(value)
        if len(value) < 3:
            raise serializers.ValidationError('Invalid email')
        return value

    def validate_password(self, value):
        if len(value) < PASSWORD_MIN_LENGTH:
            raise serializers.ValidationError(
                f'Password must be at least {PASSWORD_MIN_LENGTH} characters'
            )
        return value


class UserLoginSerializer(CredentialsSerializer):
    """Serializer for user login."""


class TokenRefreshInputSerializer(serializers.Serializer):
    """Serializer for refresh token exchange."""

    refreshToken = serializers.CharField(
        max_length=REFRESH_TOKEN_MAX_LENGTH,
        error_messages={
            'required': 'refreshToken is required',
            'blank': 'refreshToken is required',
            'max_length': 'refreshToken too long',
        },
    )


# =============================================================================
# Output Serializers
# =============================================================================

class UserMinimalSerializer(serializers.ModelSerializer):
    """User info returned alongside tokens."""

    class Meta:
        model = User
        fields = ['id', 'email']
        read_only_fields = fields


class UserSerializer(serializers.ModelSerializer):
    """Current user profile."""

    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'email', 'createdAt']
        read_only_fields = fields


class AuthSessionSerializer(serializers.Serializer):
    """Response body for register/login/refresh (documentation only)."""

    user = UserMinimalSerializer()
    accessToken = serializers.CharField()
    refreshToken = serializers.CharField()
    expiresIn = serializers.IntegerField()
