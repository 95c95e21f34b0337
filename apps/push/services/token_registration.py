"""Device token registration."""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction

from ..models import Platform, PushToken

User = get_user_model()
logger = logging.getLogger(__name__)


def normalize_platform(platform: Optional[str]) -> str:
    """Unknown or missing platforms are treated as web."""
    if platform in Platform.values:
        return platform
    return Platform.WEB


@transaction.atomic
def register_token(*, user: User, token: str, platform: Optional[str] = None) -> PushToken:
    """
    Register a device token for the user.

    Registering a token that is already known moves it to this user and
    platform.
    """
    push_token, created = PushToken.objects.update_or_create(
        token=token,
        defaults={'user': user, 'platform': normalize_platform(platform)},
    )
    logger.info(
        "%s push token for user %s (%s)",
        'Registered' if created else 'Reassigned',
        user.id,
        push_token.platform,
    )
    return push_token
