"""Services for accounts business logic."""

from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidRefreshTokenError,
    UserNotFoundError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, get_user_profile
from .token_sessions import issue_tokens, refresh_session, access_token_lifetime_seconds

__all__ = [
    # Exceptions
    'DuplicateEmailError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidRefreshTokenError',
    'UserNotFoundError',
    # Services
    'register_user',
    'authenticate_user',
    'get_user_profile',
    'issue_tokens',
    'refresh_session',
    'access_token_lifetime_seconds',
]
