"""
Grocery list CRUD, scoped to the owning user.

A list that exists but belongs to somebody else is reported exactly like a
missing one.
"""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Prefetch, QuerySet

from apps.common.ids import parse_uuid
from ..models import GroceryList, ListItem, ListType, DEFAULT_LIST_NAME
from .exceptions import ListNotFoundError

User = get_user_model()
logger = logging.getLogger(__name__)

# Fields a PATCH may touch; anything else in the payload is ignored
UPDATABLE_LIST_FIELDS = ('name', 'list_type', 'week_start')


def _items_prefetch() -> Prefetch:
    return Prefetch(
        'items',
        queryset=ListItem.objects.select_related('canonical_product').order_by('sort_order', 'created_at'),
    )


def _normalize_name(name: Optional[str]) -> str:
    name = (name or '').strip()
    return name or DEFAULT_LIST_NAME


def _normalize_week_start(week_start: Optional[str]) -> Optional[str]:
    if week_start is None:
        return None
    return week_start.strip() or None


def get_lists_for_user(*, user: User, include_items: bool = False) -> QuerySet[GroceryList]:
    """
    All lists owned by the user, most recently updated first.

    Args:
        user: Owner
        include_items: Prefetch each list's items (with their products)
    """
    queryset = GroceryList.objects.filter(user=user).order_by('-updated_at')
    if include_items:
        queryset = queryset.prefetch_related(_items_prefetch())
    return queryset


def get_list_for_user(*, user: User, list_id, include_items: bool = False) -> GroceryList:
    """
    Fetch one list owned by the user.

    Raises:
        ListNotFoundError: If the id is malformed, unknown, or owned by someone else
    """
    pk = parse_uuid(list_id)
    if pk is None:
        raise ListNotFoundError()

    queryset = GroceryList.objects.filter(user=user)
    if include_items:
        queryset = queryset.prefetch_related(_items_prefetch())

    try:
        return queryset.get(pk=pk)
    except GroceryList.DoesNotExist:
        raise ListNotFoundError()


def lock_list_for_user(*, user: User, list_id) -> GroceryList:
    """Same as get_list_for_user, but takes a row lock. Call inside a transaction."""
    pk = parse_uuid(list_id)
    if pk is None:
        raise ListNotFoundError()
    try:
        return GroceryList.objects.select_for_update().get(pk=pk, user=user)
    except GroceryList.DoesNotExist:
        raise ListNotFoundError()


@transaction.atomic
def create_list(
    *,
    user: User,
    name: Optional[str] = None,
    list_type: str = ListType.CUSTOM,
    week_start: Optional[str] = None,
) -> GroceryList:
    """
    Create a list for the user.

    A missing or blank name becomes "New list"; a blank week_start is stored
    as null.
    """
    grocery_list = GroceryList.objects.create(
        user=user,
        name=_normalize_name(name),
        list_type=list_type or ListType.CUSTOM,
        week_start=_normalize_week_start(week_start),
    )
    logger.info("User %s created list %s", user.id, grocery_list.id)
    return grocery_list


@transaction.atomic
def update_list(*, user: User, list_id, data: dict) -> GroceryList:
    """
    Partially update a list.

    Only keys present in ``data`` are applied. When none of the updatable
    fields is present the list is returned untouched, ``updated_at`` included.

    Raises:
        ListNotFoundError: If the list is not the user's
    """
    grocery_list = lock_list_for_user(user=user, list_id=list_id)

    changes = {key: data[key] for key in UPDATABLE_LIST_FIELDS if key in data}
    if not changes:
        return grocery_list

    if 'name' in changes:
        changes['name'] = _normalize_name(changes['name'])
    if 'week_start' in changes:
        changes['week_start'] = _normalize_week_start(changes['week_start'])
    if 'list_type' in changes and not changes['list_type']:
        changes['list_type'] = ListType.CUSTOM

    for field, value in changes.items():
        setattr(grocery_list, field, value)
    grocery_list.save(update_fields=[*changes.keys(), 'updated_at'])

    return grocery_list


@transaction.atomic
def delete_list(*, user: User, list_id) -> None:
    """
    Delete a list along with its items and store associations.

    Raises:
        ListNotFoundError: If the list is not the user's
    """
    grocery_list = lock_list_for_user(user=user, list_id=list_id)
    grocery_list_id = grocery_list.id
    grocery_list.delete()
    logger.info("User %s deleted list %s", user.id, grocery_list_id)
