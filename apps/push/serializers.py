from rest_framework import serializers


class RegisterPushTokenSerializer(serializers.Serializer):
    """
    Validate body for registering a device token.

    ``platform`` is free-form here; unknown values are normalised to web by
    the service rather than rejected.
    """

    token = serializers.CharField(
        max_length=512,
        error_messages={
            'required': 'token is required',
            'blank': 'token is required',
            'null': 'token is required',
            'max_length': 'token too long',
        },
    )
    platform = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class PushRegistrationSerializer(serializers.Serializer):
    registered = serializers.BooleanField()
