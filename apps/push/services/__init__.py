"""Services for push notification registration."""

from .token_registration import register_token, normalize_platform

__all__ = [
    'register_token',
    'normalize_platform',
]
