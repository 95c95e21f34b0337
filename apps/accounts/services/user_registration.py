"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import DuplicateEmailError

User = get_user_model()
logger = logging.getLogger(__name__)


def register_user(*, email: str, password: str) -> User:
    """
    Register a new user.

    Args:
        email: User's email address (normalized to lower case)
        password: User's password (will be hashed)

    Returns:
        Created User instance

    Raises:
        DuplicateEmailError: If an account with this email exists
    """
    email = User.objects.normalize_email(email)

    if User.objects.filter(email=email).exists():
        raise DuplicateEmailError()

    try:
        with transaction.atomic():
            user = User.objects.create_user(email=email, password=password)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        raise DuplicateEmailError()

    logger.info("Registered user %s", user.id)
    return user
