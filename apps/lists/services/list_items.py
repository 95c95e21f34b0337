"""Adding, updating and removing items on a list."""

import logging
from typing import Optional

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Max

from apps.catalog.services import get_product_by_id
from apps.common.ids import parse_uuid
from ..models import GroceryList, ListItem
from .exceptions import ItemNotFoundError, InvalidListItemError
from .list_management import lock_list_for_user

User = get_user_model()
logger = logging.getLogger(__name__)


def _touch(grocery_list: GroceryList) -> None:
    grocery_list.save(update_fields=['updated_at'])


def _next_sort_order(grocery_list: GroceryList) -> int:
    current = grocery_list.items.aggregate(max_order=Max('sort_order'))['max_order']
    return (current or 0) + 1


def _get_item(grocery_list: GroceryList, item_id) -> ListItem:
    pk = parse_uuid(item_id)
    if pk is None:
        raise ItemNotFoundError()
    try:
        return (
            ListItem.objects
            .select_related('canonical_product')
            .get(pk=pk, grocery_list=grocery_list)
        )
    except ListItem.DoesNotExist:
        raise ItemNotFoundError()


@transaction.atomic
def add_list_item(
    *,
    user: User,
    list_id,
    canonical_product_id: Optional[str] = None,
    free_text: Optional[str] = None,
    quantity: Optional[float] = None,
) -> ListItem:
    """
    Append an item to the end of a list.

    Args:
        user: Owner of the list
        list_id: Target list
        canonical_product_id: Catalog product to resolve against
        free_text: Label for items not in the catalog
        quantity: Positive amount, defaults to 1

    Returns:
        The new ListItem, with its product loaded

    Raises:
        ListNotFoundError: If the list is not the user's
        ProductNotFoundError: If canonical_product_id is unknown
        InvalidListItemError: If neither a product nor free text is given
    """
    free_text = (free_text or '').strip() or None
    canonical_product_id = canonical_product_id or None
    if canonical_product_id is None and free_text is None:
        raise InvalidListItemError()

    # Row lock serializes concurrent appends so sort_order stays unique
    grocery_list = lock_list_for_user(user=user, list_id=list_id)

    product = None
    if canonical_product_id is not None:
        product = get_product_by_id(product_id=canonical_product_id)

    item = ListItem.objects.create(
        grocery_list=grocery_list,
        canonical_product=product,
        free_text=free_text,
        quantity=quantity if quantity is not None else 1.0,
        sort_order=_next_sort_order(grocery_list),
    )
    _touch(grocery_list)

    logger.debug("Added item %s to list %s", item.id, grocery_list.id)
    return item


@transaction.atomic
def update_list_item(
    *,
    user: User,
    list_id,
    item_id,
    quantity: Optional[float] = None,
    checked: Optional[bool] = None,
) -> ListItem:
    """
    Update quantity and/or checked state of an item.

    Raises:
        ListNotFoundError: If the list is not the user's
        ItemNotFoundError: If the item is not on that list
    """
    grocery_list = lock_list_for_user(user=user, list_id=list_id)
    item = _get_item(grocery_list, item_id)

    update_fields = []
    if quantity is not None:
        item.quantity = quantity
        update_fields.append('quantity')
    if checked is not None:
        item.checked = checked
        update_fields.append('checked')

    if update_fields:
        item.save(update_fields=update_fields)
        _touch(grocery_list)

    return item


@transaction.atomic
def delete_list_item(*, user: User, list_id, item_id) -> None:
    """
    Raises:
        ListNotFoundError: If the list is not the user's
        ItemNotFoundError: If the item is not on that list
    """
    grocery_list = lock_list_for_user(user=user, list_id=list_id)
    item = _get_item(grocery_list, item_id)
    item.delete()
    _touch(grocery_list)
