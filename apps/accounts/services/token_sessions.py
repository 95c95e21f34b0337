"""
Access/refresh token sessions.

Signing and verification are delegated to simplejwt. Refresh tokens are
single use: exchanging one blacklists it and issues a fresh pair.
"""

import logging

from django.contrib.auth import get_user_model
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import RefreshToken

from .exceptions import InvalidRefreshTokenError

User = get_user_model()
logger = logging.getLogger(__name__)


def access_token_lifetime_seconds() -> int:
    return int(api_settings.ACCESS_TOKEN_LIFETIME.total_seconds())


def issue_tokens(user: User) -> dict:
    """
    Create a new session for the user.

    Returns:
        Dict with accessToken, refreshToken and expiresIn (seconds)
    """
    refresh = RefreshToken.for_user(user)
    return {
        'accessToken': str(refresh.access_token),
        'refreshToken': str(refresh),
        'expiresIn': access_token_lifetime_seconds(),
    }


def refresh_session(*, refresh_token: str) -> tuple[User, dict]:
    """
    Exchange a refresh token for a new token pair.

    Args:
        refresh_token: Encoded refresh token from a previous login/refresh

    Returns:
        Tuple of (User, tokens dict)

    Raises:
        InvalidRefreshTokenError: If the token is invalid, expired, of the
            wrong type, already used, or its user no longer exists
    """
    try:
        refresh = RefreshToken(refresh_token)
    except TokenError:
        raise InvalidRefreshTokenError()

    user_id = refresh.payload.get(api_settings.USER_ID_CLAIM)
    user = User.objects.filter(id=user_id, is_active=True).first()
    if user is None:
        raise InvalidRefreshTokenError()

    refresh.blacklist()

    logger.debug("Rotated refresh token for user %s", user.id)
    return user, issue_tokens(user)
