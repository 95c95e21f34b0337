"""User authentication service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError, UserNotFoundError

User = get_user_model()


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: User's email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    email = User.objects.normalize_email(email)

    # Get user with lock to prevent race conditions on last_login
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email=email)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError()

    # Check password
    if not user.has_usable_password() or not user.check_password(password):
        raise InvalidCredentialsError()

    # Check if active
    if not user.is_active:
        raise InactiveAccountError()

    # Update last login
    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user


def get_user_profile(*, user_id) -> User:
    """
    Load an active user by id.

    Raises:
        UserNotFoundError: If no such user exists
    """
    try:
        return User.objects.get(id=user_id, is_active=True)
    except User.DoesNotExist:
        raise UserNotFoundError()
