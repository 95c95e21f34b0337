"""Which stores a list will be shopped at."""

from django.contrib.auth import get_user_model
from django.db import transaction

from apps.stores.services import existing_store_ids
from ..models import ListStore
from .list_management import get_list_for_user, lock_list_for_user

User = get_user_model()

MAX_LIST_STORES = 50


def get_list_store_ids(*, user: User, list_id) -> list[str]:
    """
    Store ids associated with the list, in the order they were set.

    Raises:
        ListNotFoundError: If the list is not the user's
    """
    grocery_list = get_list_for_user(user=user, list_id=list_id)
    return list(
        ListStore.objects
        .filter(grocery_list=grocery_list)
        .order_by('position')
        .values_list('store_id', flat=True)
    )


@transaction.atomic
def set_list_stores(*, user: User, list_id, store_ids: list[str]) -> list[str]:
    """
    Replace the list's store associations.

    Unknown store ids are dropped silently and duplicates collapse to one.
    The caller's order is preserved.

    Returns:
        The resulting store ids

    Raises:
        ListNotFoundError: If the list is not the user's
    """
    grocery_list = lock_list_for_user(user=user, list_id=list_id)

    requested = list(dict.fromkeys(store_ids))
    known = existing_store_ids(requested)
    kept = [store_id for store_id in requested if store_id in known]

    ListStore.objects.filter(grocery_list=grocery_list).delete()
    ListStore.objects.bulk_create(
        ListStore(grocery_list=grocery_list, store_id=store_id, position=index)
        for index, store_id in enumerate(kept)
    )

    grocery_list.save(update_fields=['updated_at'])
    return kept
