"""User favorite stores service."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from ..models import Store, UserFavoriteStore
from .exceptions import StoreNotFoundError

User = get_user_model()
logger = logging.getLogger(__name__)


def get_favorite_store_ids(*, user: User) -> list[str]:
    """Favorite store ids for a user, oldest first."""
    return list(
        UserFavoriteStore.objects
        .filter(user=user)
        .order_by('created_at')
        .values_list('store_id', flat=True)
    )


@transaction.atomic
def add_favorite(*, user: User, store_id: str) -> list[str]:
    """
    Add a store to the user's favorites. Adding an existing favorite is a no-op.

    Returns:
        Updated list of favorite store ids

    Raises:
        StoreNotFoundError: If the store doesn't exist
    """
    if not Store.objects.filter(id=store_id).exists():
        raise StoreNotFoundError()

    _, created = UserFavoriteStore.objects.get_or_create(user=user, store_id=store_id)
    if created:
        logger.info("User %s added favorite store %s", user.id, store_id)

    return get_favorite_store_ids(user=user)


@transaction.atomic
def remove_favorite(*, user: User, store_id: str) -> list[str]:
    """
    Remove a store from the user's favorites. Unknown ids are ignored.

    Returns:
        Updated list of favorite store ids
    """
    UserFavoriteStore.objects.filter(user=user, store_id=store_id).delete()
    return get_favorite_store_ids(user=user)
